"""Validation output shared by the ABI and typed data validators."""

from pydantic import BaseModel, computed_field

from abitype.domain.enums import ValidationErrorType
from abitype.domain.models.type_info import AbiTypeInfo


class ValidationIssue(BaseModel):
    """One structural violation. Path is relative to the validated document, e.g. "[2].inputs[0].components[1]"."""

    model_config = {"frozen": True}

    path: str
    error_type: ValidationErrorType
    message: str

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.error_type.value}: {self.message}"


class ValidationResult(BaseModel):
    errors: list[ValidationIssue] = []
    types: dict[str, AbiTypeInfo] = {}  # path -> classification of the type string found there

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.errors

    def errors_of(self, error_type: ValidationErrorType) -> list[ValidationIssue]:
        return [e for e in self.errors if e.error_type == error_type]

    def raise_for_errors(self) -> None:
        if self.errors:
            raise AbiValidationError(self.errors)


class AbiValidationError(ValueError):
    """Raised only by helpers that explicitly opt into exceptions (raise_for_errors, parse_abi)."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        lines = "\n".join(f"  {issue}" for issue in self.issues)
        super().__init__(f"{len(self.issues)} validation error(s):\n{lines}")
