"""Application dependency container."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from functools import cached_property

from storefront.application.services.credentials import SharedPasswordChecker
from storefront.domain.users import CredentialChecker
from storefront.infrastructure.seed_data import seed_users
from storefront.infrastructure.sessions import SessionManager
from storefront.infrastructure.stores import (CartStore, DataSubmissionStore,
                                              ProductStore)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.carts_controller import CartsController
from storefront.interfaces.http.controllers.data_controller import DataController
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.interfaces.http.controllers.products_controller import \
    ProductsController
from storefront.interfaces.http.controllers.profile_controller import \
    ProfileController
from storefront.shared.config import AppConfig, load_config


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Container:
    """One shared instance of every store and service per application."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.config = config or load_config()
        self.clock = clock

    @cached_property
    def credential_checker(self) -> CredentialChecker:
        return SharedPasswordChecker(self.config.session.demo_password)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            seed_users(self.clock()),
            self.credential_checker,
            ttl=timedelta(hours=self.config.session.ttl_hours),
            clock=self.clock,
        )

    @cached_property
    def product_store(self) -> ProductStore:
        return ProductStore()

    @cached_property
    def cart_store(self) -> CartStore:
        return CartStore(clock=self.clock)

    @cached_property
    def data_store(self) -> DataSubmissionStore:
        return DataSubmissionStore()

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(sessions=self.session_manager)

    @cached_property
    def profile_controller(self) -> ProfileController:
        return ProfileController(sessions=self.session_manager)

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(store=self.product_store, sessions=self.session_manager)

    @cached_property
    def carts_controller(self) -> CartsController:
        return CartsController(store=self.cart_store, sessions=self.session_manager)

    @cached_property
    def data_controller(self) -> DataController:
        return DataController(store=self.data_store, sessions=self.session_manager)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(sessions=self.session_manager, config=self.config)
