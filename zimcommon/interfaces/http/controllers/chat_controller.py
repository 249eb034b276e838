# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from zimcommon.application.use_cases.chat import AskAssistantUseCase
from zimcommon.interfaces.http.auth import BearerAuth
from zimcommon.interfaces.http.dto.chat import ChatReplyDTO, ChatRequestDTO
from zimcommon.shared.errors.validation import raise_validation_error


class ChatController:
    def __init__(self, *, ask_use_case: AskAssistantUseCase, auth: BearerAuth) -> None:
        self._ask_use_case = ask_use_case
        self._auth = auth

    def chat(self) -> tuple[Response, int]:
        try:
            dto = ChatRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        reply = self._ask_use_case.execute(dto.message)
        return jsonify(ChatReplyDTO(reply=reply).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("ai", __name__, url_prefix="/api/ai")
        bp.add_url_rule(
            "/chat", endpoint="chat", view_func=self._auth.required(self.chat), methods=["POST"]
        )
        return bp
