# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from blogapi.application.dto.users import SignInPayload
from blogapi.application.use_cases.users.sign_in import SignInUseCase
from blogapi.domain.users.exceptions import AuthenticationError
from blogapi.interfaces.http.dto.auth import TokenDTO
from blogapi.interfaces.http.request_context import json_body
from blogapi.shared.errors.validation import raise_validation_error
from blogapi.shared.logging import logger


class AuthController:
    def __init__(self, *, sign_in_use_case: SignInUseCase) -> None:
        self._sign_in_use_case = sign_in_use_case

    def login(self) -> tuple[Response, int]:
        try:
            dto = SignInPayload.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            token = self._sign_in_use_case.execute(dto.email, dto.password)
        except AuthenticationError:
            logger.warning("auth.login: rejected credentials")
            raise

        logger.info("auth.login: ok")
        return jsonify(TokenDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
