"""ValidationContext — collects issues and type classifications while walking one document."""

from typing import Any

from abitype.domain.enums import ValidationErrorType
from abitype.domain.models.type_info import AbiTypeInfo
from abitype.domain.models.validation import ValidationIssue, ValidationResult
from abitype.grammar.classifier import AbiGrammar


def child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


class ValidationContext:
    """Mutable working set for validating one document. Nothing is raised; everything is collected."""

    def __init__(self, grammar: AbiGrammar) -> None:
        self.grammar = grammar
        self._issues: list[ValidationIssue] = []
        self._types: dict[str, AbiTypeInfo] = {}

    def add(self, path: str, error_type: ValidationErrorType, message: str) -> None:
        self._issues.append(ValidationIssue(path=path, error_type=error_type, message=message))

    def classify(self, path: str, type_str: Any) -> AbiTypeInfo:
        """Classify the type found at path, recording it and reporting it if invalid."""
        info = self.grammar.classify(type_str)
        if info.is_valid:
            self._types[path] = info
        else:
            self.add(child_path(path, "type"), info.error_type or ValidationErrorType.UNRECOGNIZED_TYPE, info.reason or "")
        return info

    def record_type(self, path: str, info: AbiTypeInfo) -> None:
        self._types[path] = info

    def require_str(self, container: dict, key: str, path: str) -> str | None:
        """Report a missing or non-string field; return the value when it is a string."""
        if key not in container:
            self.add(child_path(path, key), ValidationErrorType.MISSING_REQUIRED_FIELD, f"'{key}' is required")
            return None
        value = container[key]
        if not isinstance(value, str):
            self.add(child_path(path, key), ValidationErrorType.INVALID_FIELD_VALUE, f"'{key}' must be a string")
            return None
        return value

    def result(self) -> ValidationResult:
        return ValidationResult(errors=list(self._issues), types=dict(self._types))
