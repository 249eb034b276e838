# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from zimcommon.application.use_cases.schools import (
    CompareSchoolsUseCase,
    GetSchoolUseCase,
    ListSchoolsUseCase,
)
from zimcommon.domain.schools import ComparisonRequestError
from zimcommon.interfaces.http.auth import BearerAuth
from zimcommon.interfaces.http.dto.schools import CompareRequestDTO, CompareResponseDTO


class SchoolsController:
    def __init__(
        self,
        *,
        list_use_case: ListSchoolsUseCase,
        get_use_case: GetSchoolUseCase,
        compare_use_case: CompareSchoolsUseCase,
        auth: BearerAuth,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._compare_use_case = compare_use_case
        self._auth = auth

    def list_schools(self) -> tuple[Response, int]:
        schools = self._list_use_case.execute()
        return jsonify([school.to_dict() for school in schools]), 200

    def get_school(self, school_id: str) -> tuple[Response, int]:
        school = self._get_use_case.execute(school_id)
        return jsonify(school.to_dict()), 200

    def compare(self) -> tuple[Response, int]:
        try:
            dto = CompareRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise ComparisonRequestError() from exc

        selection = self._compare_use_case.execute(dto.school_ids)
        payload = CompareResponseDTO(
            school_ids=selection.school_ids,
            school_names=selection.school_names,
        ).model_dump(by_alias=True)
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("schools", __name__, url_prefix="/api")
        bp.add_url_rule("/schools", view_func=self.list_schools, methods=["GET"])
        bp.add_url_rule("/schools/<school_id>", view_func=self.get_school, methods=["GET"])
        bp.add_url_rule(
            "/compare",
            endpoint="compare",
            view_func=self._auth.required(self.compare),
            methods=["POST"],
        )
        return bp
