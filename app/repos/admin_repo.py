from sqlalchemy import select
from sqlalchemy.orm import Session
from app.data.models.admin_user import AdminUserModel

class AdminRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_admin(self, admin_id: int) -> AdminUserModel | None:
        return self.db.get(AdminUserModel, admin_id)

    def get_by_username(self, username: str) -> AdminUserModel | None:
        return self.db.execute(
            select(AdminUserModel).where(AdminUserModel.username == username)
        ).scalar_one_or_none()

    def create_admin(self, admin: AdminUserModel) -> AdminUserModel:
        self.db.add(admin)
        self.db.commit()
        self.db.refresh(admin)
        return admin
