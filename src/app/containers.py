"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings

from src.app.infrastructure.mappers.user_mapper import UserMapper
from src.app.infrastructure.user_repository import UserRepository

from src.app.api.mappers import ContractMapper
from src.app.core.clock import SystemClock
from src.app.core.services.user_service import UserService
from src.app.core.validators.options_validator import GetAllUsersOptionsValidator
from src.app.core.validators.user_validator import UserValidator


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETON - Clock (overridden with a FixedClock in tests)
    # =========================================================================
    clock = providers.Singleton(SystemClock)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    user_mapper = providers.Singleton(UserMapper)

    contract_mapper = providers.Singleton(
        ContractMapper,
        clock=clock,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database.echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    user_repository = providers.Factory(
        UserRepository,
        db=database,
        mapper=user_mapper,
    )

    # =========================================================================
    # FACTORIES - Validators
    # =========================================================================
    user_validator = providers.Factory(
        UserValidator,
        repository=user_repository,
        clock=clock,
    )

    options_validator = providers.Factory(GetAllUsersOptionsValidator)

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    user_service = providers.Factory(
        UserService,
        repository=user_repository,
        user_validator=user_validator,
        options_validator=options_validator,
    )
