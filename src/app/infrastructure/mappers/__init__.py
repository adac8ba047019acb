"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.user_mapper import UserMapper

__all__ = [
    "UserMapper",
]
