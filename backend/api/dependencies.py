"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Settings are read once and handed to constructors;
nothing below reads configuration at call time.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports (avoids circular imports)
if TYPE_CHECKING:
    from pymongo.database import Database
    from modules.auth.interfaces import IAuthService, ICredentialHasher, ITokenService
    from modules.users.repository import UserRepository
    from modules.orders.interfaces import IOrderService
    from modules.orders.repository import OrderRepository
    from modules.categories.interfaces import ICategoryService
    from modules.categories.repository import CategoryRepository
    from modules.products.interfaces import IProductService
    from modules.products.repository import ProductRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._database: "Database | None" = None
        self._hasher: "ICredentialHasher | None" = None
        self._tokens: "ITokenService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._order_repository: "OrderRepository | None" = None
        self._category_repository: "CategoryRepository | None" = None
        self._product_repository: "ProductRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._order_service: "IOrderService | None" = None
        self._category_service: "ICategoryService | None" = None
        self._product_service: "IProductService | None" = None

    @property
    def settings(self) -> Settings:
        """Get the process configuration."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> "Database":
        """Get the MongoDB database handle."""
        if self._database is None:
            from shared.database import get_database
            self._database = get_database()
        return self._database

    @property
    def hasher(self) -> "ICredentialHasher":
        """Get the credential hasher."""
        if self._hasher is None:
            from modules.auth.hasher import CredentialHasher
            self._hasher = CredentialHasher(rounds=self.settings.bcrypt_rounds)
        return self._hasher

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                expires_days=self.settings.jwt_expires_days,
            )
        return self._tokens

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.database)
        return self._user_repository

    @property
    def order_repository(self) -> "OrderRepository":
        """Get the order repository instance."""
        if self._order_repository is None:
            from modules.orders.repository import OrderRepository
            self._order_repository = OrderRepository(self.database)
        return self._order_repository

    @property
    def category_repository(self) -> "CategoryRepository":
        """Get the category repository instance."""
        if self._category_repository is None:
            from modules.categories.repository import CategoryRepository
            self._category_repository = CategoryRepository(self.database)
        return self._category_repository

    @property
    def product_repository(self) -> "ProductRepository":
        """Get the product repository instance."""
        if self._product_repository is None:
            from modules.products.repository import ProductRepository
            self._product_repository = ProductRepository(self.database)
        return self._product_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.hasher,
                tokens=self.tokens,
            )
        return self._auth_service

    @property
    def orders(self) -> "IOrderService":
        """Get the order service instance."""
        if self._order_service is None:
            from modules.orders.service import OrderService
            self._order_service = OrderService(self.order_repository)
        return self._order_service

    @property
    def categories(self) -> "ICategoryService":
        """Get the category service instance."""
        if self._category_service is None:
            from modules.categories.service import CategoryService
            self._category_service = CategoryService(self.category_repository)
        return self._category_service

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.service import ProductService
            self._product_service = ProductService(
                repository=self.product_repository,
                categories=self.category_repository,
                settings=self.settings,
            )
        return self._product_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._database = None
        self._hasher = None
        self._tokens = None
        self._user_repository = None
        self._order_repository = None
        self._category_repository = None
        self._product_repository = None
        self._auth_service = None
        self._order_service = None
        self._category_service = None
        self._product_service = None


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

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "ITokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_user_repository() -> "UserRepository":
    """FastAPI dependency for the user repository."""
    return get_container().user_repository


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_order_service() -> "IOrderService":
    """FastAPI dependency for order service."""
    return get_container().orders


def get_category_service() -> "ICategoryService":
    """FastAPI dependency for category service."""
    return get_container().categories


def get_product_service() -> "IProductService":
    """FastAPI dependency for product service."""
    return get_container().products
