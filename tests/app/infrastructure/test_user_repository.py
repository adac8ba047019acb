from datetime import date

import pytest
import pytest_asyncio

from src.app.core.domain.models import GetAllUsersOptions
from src.app.infrastructure.mappers.user_mapper import UserMapper
from src.app.infrastructure.user_repository import UserRepository
from src.shared.database.database import Base
from src.shared.exceptions import StorageError
from tests.factories import make_user


@pytest_asyncio.fixture
async def user_repository(clean_database):
    """Create a user repository."""
    return UserRepository(clean_database, UserMapper())


async def seed(repository, count: int, start_year: int = 1980):
    """Insert `count` users born one year apart, starting at start_year."""
    users = []
    for i in range(count):
        user = make_user(
            first_name=f"User{i}",
            email=f"user{i}@example.com",
            date_of_birth=date(start_year + i, 6, 15),
        )
        await repository.create(user)
        users.append(user)
    return users


@pytest.mark.asyncio
async def test_create_assigns_generated_id(user_repository):
    """Test inserting a user writes the generated id back onto it."""
    user = make_user()

    created = await user_repository.create(user)

    assert created is True
    assert user.id > 0


@pytest.mark.asyncio
async def test_get_user_by_id(user_repository):
    """Test retrieving a user by ID."""
    # Arrange
    user = make_user(last_name=None)
    await user_repository.create(user)

    # Act
    retrieved = await user_repository.get_by_id(user.id)

    # Assert
    assert retrieved is not None
    assert retrieved.id == user.id
    assert retrieved.personal_data.first_name == "John"
    assert retrieved.personal_data.last_name is None
    assert retrieved.personal_data.date_of_birth == date(2000, 1, 1)
    assert retrieved.personal_data.phone_number == "1234567890"
    assert retrieved.email_address.email == "john.doe@example.com"


@pytest.mark.asyncio
async def test_get_user_by_id_not_found(user_repository):
    """Test retrieving a non-existent user by ID returns None."""
    assert await user_repository.get_by_id(12345) is None


@pytest.mark.asyncio
async def test_get_user_by_email(user_repository):
    """Test retrieving a user by exact email."""
    user = make_user(email="jane.smith@example.com")
    await user_repository.create(user)

    retrieved = await user_repository.get_by_email("jane.smith@example.com")

    assert retrieved is not None
    assert retrieved.id == user.id


@pytest.mark.asyncio
async def test_get_user_by_email_not_found(user_repository):
    """Test retrieving a non-existent user by email returns None."""
    assert await user_repository.get_by_email("nonexistent@example.com") is None


@pytest.mark.asyncio
async def test_get_by_email_skips_excluded_user(user_repository):
    """Test a later duplicate keeping its email is not matched against itself."""
    first = make_user(first_name="First")
    second = make_user(first_name="Second")
    await user_repository.create(first)
    await user_repository.create(second)

    assert (await user_repository.get_by_email("john.doe@example.com")).id == first.id
    assert (await user_repository.get_by_email("john.doe@example.com", exclude_id=second.id)).id == first.id
    assert (await user_repository.get_by_email("john.doe@example.com", exclude_id=first.id)).id == second.id


@pytest.mark.asyncio
async def test_get_all_pages_in_id_order(user_repository):
    users = await seed(user_repository, 5)

    first = await user_repository.get_all(GetAllUsersOptions(page=1, page_size=2))
    second = await user_repository.get_all(GetAllUsersOptions(page=2, page_size=2))
    third = await user_repository.get_all(GetAllUsersOptions(page=3, page_size=2))

    assert [u.id for u in first] == [users[0].id, users[1].id]
    assert [u.id for u in second] == [users[2].id, users[3].id]
    assert [u.id for u in third] == [users[4].id]


@pytest.mark.asyncio
async def test_get_all_past_the_last_page_is_empty(user_repository):
    await seed(user_repository, 2)

    assert await user_repository.get_all(GetAllUsersOptions(page=2, page_size=10)) == []


@pytest.mark.asyncio
async def test_get_all_with_offset_beyond_bigint_is_empty(user_repository):
    await seed(user_repository, 2)

    page = await user_repository.get_all(GetAllUsersOptions(page=10**18, page_size=25))

    assert page == []


@pytest.mark.asyncio
async def test_date_filter_is_inclusive_and_shared_with_count(user_repository):
    # Born 1980-06-15 .. 1984-06-15
    users = await seed(user_repository, 5)
    cutoff = date(1982, 6, 15)

    page = await user_repository.get_all(GetAllUsersOptions(date=cutoff, page=1, page_size=25))
    count = await user_repository.get_count(cutoff)

    assert [u.id for u in page] == [u.id for u in users[2:]]
    assert count == 3


@pytest.mark.asyncio
async def test_count_without_filter_ignores_paging(user_repository):
    await seed(user_repository, 4)

    assert await user_repository.get_count(None) == 4


@pytest.mark.asyncio
async def test_update_existing_user(user_repository):
    user = make_user()
    await user_repository.create(user)
    user.personal_data.first_name = "Johnny"
    user.email_address.email = "johnny@example.com"

    updated = await user_repository.update(user)

    assert updated is True
    stored = await user_repository.get_by_id(user.id)
    assert stored.personal_data.first_name == "Johnny"
    assert stored.email_address.email == "johnny@example.com"


@pytest.mark.asyncio
async def test_update_missing_user_affects_nothing(user_repository):
    assert await user_repository.update(make_user(user_id=999)) is False


@pytest.mark.asyncio
async def test_delete_by_id(user_repository):
    user = make_user()
    await user_repository.create(user)

    assert await user_repository.delete_by_id(user.id) is True
    assert await user_repository.get_by_id(user.id) is None
    assert await user_repository.delete_by_id(user.id) is False


@pytest.mark.asyncio
async def test_store_failure_raises_storage_error(user_repository, clean_database):
    async with clean_database._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    with pytest.raises(StorageError) as exc_info:
        await user_repository.get_by_id(1)

    assert exc_info.value.entity_name == "User"
