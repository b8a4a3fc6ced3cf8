from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class UserRoleModel(Base):
    """Role grants; users themselves live in the external identity provider."""

    __tablename__ = 'user_roles'

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    role: Mapped[str] = mapped_column(String(20), primary_key=True)
