"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Repositories share the one Supabase client; services receive their
repositories and the farm context resolver through their constructors.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.activities.interfaces import IActivityService
    from modules.activities.repository import ActivityRepository
    from modules.animals.interfaces import IAnimalService
    from modules.animals.repository import AnimalRepository
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.farms.context import FarmContextResolver
    from modules.farms.interfaces import IFarmService
    from modules.farms.repository import FarmRepository
    from modules.notifications.service import NotificationService
    from modules.staff.interfaces import IStaffService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self.reset()

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def farm_repository(self) -> "FarmRepository":
        if self._farm_repository is None:
            from modules.farms.repository import FarmRepository
            self._farm_repository = FarmRepository(self.db)
        return self._farm_repository

    @property
    def animal_repository(self) -> "AnimalRepository":
        if self._animal_repository is None:
            from modules.animals.repository import AnimalRepository
            self._animal_repository = AnimalRepository(self.db)
        return self._animal_repository

    @property
    def activity_repository(self) -> "ActivityRepository":
        if self._activity_repository is None:
            from modules.activities.repository import ActivityRepository
            self._activity_repository = ActivityRepository(self.db)
        return self._activity_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.user_repository)
        return self._auth_service

    @property
    def farm_context(self) -> "FarmContextResolver":
        """Get the farm context resolver."""
        if self._farm_context is None:
            from modules.farms.context import FarmContextResolver
            from shared.config import get_settings
            self._farm_context = FarmContextResolver(
                self.farm_repository,
                use_union_query=get_settings().farm_context_use_union_query,
            )
        return self._farm_context

    @property
    def farms(self) -> "IFarmService":
        """Get the farm service instance."""
        if self._farm_service is None:
            from modules.farms.service import FarmService
            self._farm_service = FarmService(self.farm_repository, self.farm_context)
        return self._farm_service

    @property
    def animals(self) -> "IAnimalService":
        """Get the animal service instance."""
        if self._animal_service is None:
            from modules.animals.service import AnimalService
            self._animal_service = AnimalService(self.animal_repository, self.farm_context)
        return self._animal_service

    @property
    def activities(self) -> "IActivityService":
        """Get the activity service instance."""
        if self._activity_service is None:
            from modules.activities.service import ActivityService
            self._activity_service = ActivityService(
                repository=self.activity_repository,
                animals=self.animal_repository,
                resolver=self.farm_context,
            )
        return self._activity_service

    @property
    def staff(self) -> "IStaffService":
        """Get the staff service instance."""
        if self._staff_service is None:
            from modules.staff.repository import StaffRepository
            from modules.staff.service import StaffService
            self._staff_service = StaffService(
                staff=StaffRepository(self.db),
                users=self.user_repository,
                farms=self.farm_repository,
                auth=self.auth,
            )
        return self._staff_service

    @property
    def notifications(self) -> "NotificationService":
        """Get the notification service instance."""
        if self._notification_service is None:
            from modules.notifications.service import NotificationService
            self._notification_service = NotificationService(self.activity_repository)
        return self._notification_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._user_repository = None
        self._farm_repository = None
        self._animal_repository = None
        self._activity_repository = None
        self._auth_service = None
        self._farm_context = None
        self._farm_service = None
        self._animal_service = None
        self._activity_service = None
        self._staff_service = None
        self._notification_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_farm_context_resolver() -> "FarmContextResolver":
    """FastAPI dependency for the farm context resolver."""
    return get_container().farm_context


def get_farm_service() -> "IFarmService":
    """FastAPI dependency for farm service."""
    return get_container().farms


def get_animal_service() -> "IAnimalService":
    """FastAPI dependency for animal service."""
    return get_container().animals


def get_activity_service() -> "IActivityService":
    """FastAPI dependency for activity service."""
    return get_container().activities


def get_staff_service() -> "IStaffService":
    """FastAPI dependency for staff service."""
    return get_container().staff


def get_notification_service() -> "NotificationService":
    """FastAPI dependency for notification service."""
    return get_container().notifications
