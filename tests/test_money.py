import pytest

from app.domain.money import format_cents, line_total, sum_cents


def test_line_total():
    assert line_total(1999, 2) == 3998


def test_sum_of_lines_has_no_float_drift():
    assert sum_cents([line_total(1999, 2), line_total(599, 1)]) == 4597
    assert sum_cents(line_total(10, 1) for _ in range(3)) == 30
    assert sum_cents([]) == 0


@pytest.mark.parametrize("price,qty", [(19.99, 1), (100, 1.0), (True, 1), ("5", 1)])
def test_non_integer_amounts_are_refused(price, qty):
    with pytest.raises(TypeError):
        line_total(price, qty)


def test_invalid_values():
    with pytest.raises(ValueError):
        line_total(-1, 1)
    with pytest.raises(ValueError):
        line_total(100, 0)


def test_format_cents():
    assert format_cents(4597) == "$45.97"
    assert format_cents(5) == "$0.05"
    assert format_cents(129900) == "$1,299.00"
    assert format_cents(-250, symbol="€") == "-€2.50"
