from typing import Annotated

from fastapi import APIRouter, Depends

from abitype.api.deps import get_abi_validator, get_typed_data_validator
from abitype.api.schemas.validation import AbiValidateRequest, TypedDataValidateRequest
from abitype.domain.models.validation import ValidationResult
from abitype.validation.abi import AbiValidator
from abitype.validation.typed_data import TypedDataValidator

router = APIRouter(prefix="/api", tags=["validate"])


@router.post("/abi/validate", response_model=ValidationResult)
def validate_abi(
    body: AbiValidateRequest,
    validator: Annotated[AbiValidator, Depends(get_abi_validator)],
) -> ValidationResult:
    """Structural errors are reported in the body; the request itself still succeeds."""
    return validator.validate(body.abi)


@router.post("/typed-data/validate", response_model=ValidationResult)
def validate_typed_data(
    body: TypedDataValidateRequest,
    validator: Annotated[TypedDataValidator, Depends(get_typed_data_validator)],
) -> ValidationResult:
    return validator.validate(body.types, body.domain)
