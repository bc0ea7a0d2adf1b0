from typing import Any, Optional

from pydantic import BaseModel, Field

from abitype.domain.models.type_info import AbiTypeInfo


class ClassifyRequest(BaseModel):
    types: list[str] = Field(min_length=1, max_length=500)


class ClassifyResponse(BaseModel):
    results: list[AbiTypeInfo]


class AbiValidateRequest(BaseModel):
    abi: Any  # shape is checked by the validator, not by request parsing


class TypedDataValidateRequest(BaseModel):
    types: Any
    domain: Optional[dict[str, Any]] = None
