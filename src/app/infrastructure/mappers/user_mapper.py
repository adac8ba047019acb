from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import EmailAddress, PersonalData, User
from src.app.infrastructure.entities.user_entity import UserEntity


class UserMapper(BaseEntityMapper[User, UserEntity]):
    """Mapper for converting between User domain model and UserEntity."""

    @staticmethod
    def to_entity(model_instance: User) -> UserEntity:
        """Convert a User (domain model) to UserEntity. An id of 0 is left for the store to assign."""
        personal_data = model_instance.personal_data
        return UserEntity(
            id=model_instance.id or None,
            first_name=personal_data.first_name,
            last_name=personal_data.last_name,
            email=model_instance.email_address.email,
            date_of_birth=personal_data.date_of_birth,
            phone_number=personal_data.phone_number,
        )

    @staticmethod
    def to_model(entity: UserEntity) -> User:
        """Convert a UserEntity (database entity) to User (domain model)."""
        return User(
            id=entity.id,
            personal_data=PersonalData(
                first_name=entity.first_name,
                last_name=entity.last_name,
                phone_number=entity.phone_number,
                date_of_birth=entity.date_of_birth,
            ),
            email_address=EmailAddress(email=entity.email),
        )
