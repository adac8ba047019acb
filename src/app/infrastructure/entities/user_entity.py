from datetime import date
from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class UserEntity(Base):
    """SQLAlchemy model for Users table."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(128))
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    # Uniqueness is a validation rule, not a database constraint
    email: Mapped[str] = mapped_column(String(255), index=True)
    date_of_birth: Mapped[date] = mapped_column(Date, index=True)
    phone_number: Mapped[str] = mapped_column(String(10))
