from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompareRequestDTO(BaseModel):
    school_ids: list[int | str] = Field(default_factory=list, alias="schoolIds")

    model_config = ConfigDict(validate_by_name=True)


class CompareResponseDTO(BaseModel):
    message: str = "Schools selected for comparison."
    school_ids: list[int] = Field(serialization_alias="schoolIds")
    school_names: list[str] = Field(serialization_alias="schoolNames")
