# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from zimcommon.application.use_cases.users import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from zimcommon.interfaces.http.auth import BearerAuth
from zimcommon.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    CurrentUserDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from zimcommon.shared.errors.validation import raise_validation_error
from zimcommon.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        auth: BearerAuth,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case
        self._auth = auth

    def signup(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)

        payload = AuthSuccessDTO(token=token, user=UserDTO.from_domain(user)).model_dump()
        logger.info(f"auth.signup: ok user_id={user.id}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.email, dto.password)

        payload = AuthSuccessDTO(token=token, user=UserDTO.from_domain(user)).model_dump()
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload), 200

    def me(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(g.user_id)
        return jsonify(CurrentUserDTO(user=UserDTO.from_domain(user)).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/register", endpoint="register", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", endpoint="me", view_func=self._auth.required(self.me), methods=["GET"])
        return bp
