# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from blogapi.application.services.token_service import TokenService
from blogapi.application.use_cases.users.create_user import CreateUserUseCase
from blogapi.application.use_cases.users.delete_user import DeleteUserUseCase
from blogapi.application.use_cases.users.get_user import GetUserUseCase
from blogapi.application.use_cases.users.list_users import ListUsersUseCase
from blogapi.application.use_cases.users.update_user import UpdateUserUseCase
from blogapi.interfaces.http.dto.users import UserResponseDTO
from blogapi.interfaces.http.request_context import (
    authenticate,
    json_body,
    parse_identifier,
)
from blogapi.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        tokens: TokenService,
        create_user: CreateUserUseCase,
        list_users: ListUsersUseCase,
        get_user: GetUserUseCase,
        update_user: UpdateUserUseCase,
        delete_user: DeleteUserUseCase,
    ) -> None:
        self._tokens = tokens
        self._create_user = create_user
        self._list_users = list_users
        self._get_user = get_user
        self._update_user = update_user
        self._delete_user = delete_user

    def create(self) -> tuple[Response, int]:
        user = self._create_user.execute(json_body())
        response = jsonify(UserResponseDTO.render(user))
        response.headers["Location"] = f"/users/{user.id}"
        logger.info(f"users.create: ok (user_id={user.id})")
        return response, 201

    def list_users(self) -> tuple[Response, int]:
        users = self._list_users.execute()
        logger.info(f"users.list: ok (n={len(users)})")
        return jsonify([UserResponseDTO.render(user) for user in users]), 200

    def get(self, user_id: str) -> tuple[Response, int]:
        user = self._get_user.execute(parse_identifier(user_id))
        return jsonify(UserResponseDTO.render(user)), 200

    def update(self, user_id: str) -> tuple[Response, int]:
        target_id = parse_identifier(user_id)
        caller_id = authenticate(self._tokens)
        user = self._update_user.execute(caller_id, target_id, json_body())
        logger.info(f"users.update: ok (user_id={caller_id}, target={target_id})")
        return jsonify(UserResponseDTO.render(user)), 200

    def delete(self, user_id: str) -> Response:
        target_id = parse_identifier(user_id)
        caller_id = authenticate(self._tokens)
        self._delete_user.execute(caller_id, target_id)
        logger.info(f"users.delete: ok (user_id={caller_id}, target={target_id})")
        response = Response(status=204)
        response.headers["Entity"] = str(target_id)
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/users", view_func=self.list_users, methods=["GET"])
        bp.add_url_rule("/users/<user_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/users/<user_id>", view_func=self.update, methods=["PUT", "POST"])
        bp.add_url_rule("/users/<user_id>", view_func=self.delete, methods=["DELETE"])
        return bp
