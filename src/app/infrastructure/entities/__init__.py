"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.user_entity import UserEntity

__all__ = [
    "UserEntity",
]
