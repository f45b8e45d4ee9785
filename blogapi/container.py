# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container.

One container is built per application from an explicit ``AppConfig``; every
handler gets its collaborators from here instead of module-level state.
"""

from __future__ import annotations

from functools import cached_property
from http import HTTPStatus

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher
from blogapi.application.services.token_service import TokenService
from blogapi.application.use_cases.posts.create_post import CreatePostUseCase
from blogapi.application.use_cases.posts.delete_post import DeletePostUseCase
from blogapi.application.use_cases.posts.get_post import GetPostUseCase
from blogapi.application.use_cases.posts.list_posts import ListPostsUseCase
from blogapi.application.use_cases.posts.update_post import UpdatePostUseCase
from blogapi.application.use_cases.users.create_user import CreateUserUseCase
from blogapi.application.use_cases.users.delete_user import DeleteUserUseCase
from blogapi.application.use_cases.users.get_user import GetUserUseCase
from blogapi.application.use_cases.users.list_users import ListUsersUseCase
from blogapi.application.use_cases.users.sign_in import SignInUseCase
from blogapi.application.use_cases.users.update_user import UpdateUserUseCase
from blogapi.domain.ownership import OwnershipGuard
from blogapi.infrastructure.db import Database
from blogapi.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blogapi.interfaces.http.controllers.auth_controller import AuthController
from blogapi.interfaces.http.controllers.misc_controller import MiscController
from blogapi.interfaces.http.controllers.posts_controller import PostsController
from blogapi.interfaces.http.controllers.users_controller import UsersController
from blogapi.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> TokenService:
        return TokenService(
            secret_key=self.config.secret_key,
            lifetime_seconds=self.config.token_lifetime,
            algorithm=self.config.token_algorithm,
        )

    @cached_property
    def ownership_guard(self) -> OwnershipGuard:
        return OwnershipGuard()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(
            self.database, conflict_status=HTTPStatus(self.config.conflict_status)
        )

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(
            self.database, conflict_status=HTTPStatus(self.config.conflict_status)
        )

    # Users

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            tokens=self.token_service,
            create_user=CreateUserUseCase(
                users=self.user_repository, password_hasher=self.password_hasher
            ),
            list_users=ListUsersUseCase(
                users=self.user_repository, limit=self.config.page_limit
            ),
            get_user=GetUserUseCase(users=self.user_repository),
            update_user=UpdateUserUseCase(
                users=self.user_repository,
                password_hasher=self.password_hasher,
                guard=self.ownership_guard,
            ),
            delete_user=DeleteUserUseCase(
                users=self.user_repository, guard=self.ownership_guard
            ),
        )

    # Posts

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            tokens=self.token_service,
            create_post=CreatePostUseCase(
                posts=self.post_repository, guard=self.ownership_guard
            ),
            list_posts=ListPostsUseCase(
                posts=self.post_repository, limit=self.config.page_limit
            ),
            get_post=GetPostUseCase(posts=self.post_repository),
            update_post=UpdatePostUseCase(
                posts=self.post_repository, guard=self.ownership_guard
            ),
            delete_post=DeletePostUseCase(
                posts=self.post_repository, guard=self.ownership_guard
            ),
        )

    # Auth

    @cached_property
    def sign_in_use_case(self) -> SignInUseCase:
        return SignInUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(sign_in_use_case=self.sign_in_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(metrics_enabled=self.config.observability.metrics_enabled)
