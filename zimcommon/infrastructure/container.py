# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from zimcommon.application.services.credentials import CredentialManager
from zimcommon.application.services.session_tokens import SessionTokenService
from zimcommon.application.use_cases.chat import AskAssistantUseCase
from zimcommon.application.use_cases.schools import (
    CompareSchoolsUseCase,
    GetSchoolUseCase,
    ListSchoolsUseCase,
)
from zimcommon.application.use_cases.users import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from zimcommon.infrastructure.ai import GeminiAssistant
from zimcommon.infrastructure.db import Database
from zimcommon.infrastructure.repositories.schools.sqlalchemy_school_repository import (
    SqlAlchemySchoolRepository,
)
from zimcommon.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from zimcommon.interfaces.http.auth import BearerAuth
from zimcommon.interfaces.http.controllers.auth_controller import AuthController
from zimcommon.interfaces.http.controllers.chat_controller import ChatController
from zimcommon.interfaces.http.controllers.misc_controller import MiscController
from zimcommon.interfaces.http.controllers.schools_controller import SchoolsController
from zimcommon.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def credentials(self) -> CredentialManager:
        return CredentialManager(self.config.auth)

    @cached_property
    def session_tokens(self) -> SessionTokenService:
        return SessionTokenService(self.config.auth)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def school_repository(self) -> SqlAlchemySchoolRepository:
        return SqlAlchemySchoolRepository(self.database.session_factory)

    @cached_property
    def assistant(self) -> GeminiAssistant:
        return GeminiAssistant(self.config.ai)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.credentials,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.credentials,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    @cached_property
    def list_schools_use_case(self) -> ListSchoolsUseCase:
        return ListSchoolsUseCase(schools=self.school_repository)

    @cached_property
    def get_school_use_case(self) -> GetSchoolUseCase:
        return GetSchoolUseCase(schools=self.school_repository)

    @cached_property
    def compare_schools_use_case(self) -> CompareSchoolsUseCase:
        return CompareSchoolsUseCase(schools=self.school_repository)

    @cached_property
    def ask_assistant_use_case(self) -> AskAssistantUseCase:
        return AskAssistantUseCase(assistant=self.assistant)

    # HTTP

    @cached_property
    def bearer_auth(self) -> BearerAuth:
        return BearerAuth(tokens=self.session_tokens)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
            auth=self.bearer_auth,
        )

    @cached_property
    def schools_controller(self) -> SchoolsController:
        return SchoolsController(
            list_use_case=self.list_schools_use_case,
            get_use_case=self.get_school_use_case,
            compare_use_case=self.compare_schools_use_case,
            auth=self.bearer_auth,
        )

    @cached_property
    def chat_controller(self) -> ChatController:
        return ChatController(ask_use_case=self.ask_assistant_use_case, auth=self.bearer_auth)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
