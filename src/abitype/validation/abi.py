"""AbiValidator — structural checks for contract ABI documents.

Field rules are declared per entry type:
    REQUIRED_FIELDS: must be present
    FORBIDDEN_FIELDS: must be absent
    EMPTY_ONLY_FIELDS: may be present only as an empty list (absent == empty)
    PARAMETER_FIELDS: parameter lists walked recursively
"""

import logging
from typing import Any

from abitype.config import Settings
from abitype.domain.enums import AbiItemType, SolidityFamily, StateMutability, ValidationErrorType
from abitype.domain.models.abi import AbiAdapter, AbiItem
from abitype.domain.models.validation import ValidationResult
from abitype.grammar.classifier import AbiGrammar
from abitype.validation.base import BaseValidator
from abitype.validation.context import ValidationContext, child_path, index_path

logger = logging.getLogger(__name__)

FUNCTION_FAMILY = frozenset({
    AbiItemType.FUNCTION,
    AbiItemType.CONSTRUCTOR,
    AbiItemType.FALLBACK,
    AbiItemType.RECEIVE,
})

_STATE_MUTABILITIES = {m.value for m in StateMutability}


class AbiValidator(BaseValidator):
    VALIDATOR_NAME = "AbiValidator"

    REQUIRED_FIELDS: dict[AbiItemType, tuple[str, ...]] = {
        AbiItemType.FUNCTION: ("inputs", "name", "outputs", "stateMutability"),
        AbiItemType.CONSTRUCTOR: ("inputs", "stateMutability"),
        AbiItemType.FALLBACK: ("stateMutability",),
        AbiItemType.RECEIVE: ("stateMutability",),
        AbiItemType.EVENT: ("inputs", "name"),
        AbiItemType.ERROR: ("inputs", "name"),
    }
    FORBIDDEN_FIELDS: dict[AbiItemType, tuple[str, ...]] = {
        AbiItemType.CONSTRUCTOR: ("name", "outputs"),
        AbiItemType.ERROR: ("stateMutability",),
    }
    EMPTY_ONLY_FIELDS: dict[AbiItemType, tuple[str, ...]] = {
        AbiItemType.FALLBACK: ("inputs",),
        AbiItemType.RECEIVE: ("inputs", "outputs"),
    }
    PARAMETER_FIELDS: dict[AbiItemType, tuple[str, ...]] = {
        AbiItemType.FUNCTION: ("inputs", "outputs"),
        AbiItemType.CONSTRUCTOR: ("inputs",),
        AbiItemType.EVENT: ("inputs",),
        AbiItemType.ERROR: ("inputs",),
    }

    def validate(self, document: Any) -> ValidationResult:
        ctx = self._new_context()
        if not isinstance(document, list):
            ctx.add("", ValidationErrorType.INVALID_FIELD_VALUE, "ABI must be a list of entries")
            return ctx.result()

        for i, entry in enumerate(document):
            self._check_entry(entry, index_path("", i), ctx)

        result = ctx.result()
        logger.debug("Validated ABI: %d entries, %d errors", len(document), len(result.errors))
        return result

    def _check_entry(self, entry: Any, path: str, ctx: ValidationContext) -> None:
        if not isinstance(entry, dict):
            ctx.add(path, ValidationErrorType.INVALID_FIELD_VALUE, "ABI entry must be an object")
            return

        if "type" not in entry:
            ctx.add(child_path(path, "type"), ValidationErrorType.MISSING_REQUIRED_FIELD, "'type' is required")
            return
        try:
            item_type = AbiItemType(entry["type"])
        except ValueError:
            ctx.add(
                child_path(path, "type"),
                ValidationErrorType.INVALID_FIELD_VALUE,
                f"unknown ABI entry type {entry['type']!r}",
            )
            return

        for field in self.REQUIRED_FIELDS[item_type]:
            if field not in entry:
                ctx.add(
                    child_path(path, field),
                    ValidationErrorType.MISSING_REQUIRED_FIELD,
                    f"'{field}' is required for {item_type.value} entries",
                )

        for field in self.FORBIDDEN_FIELDS.get(item_type, ()):
            if field in entry:
                ctx.add(
                    child_path(path, field),
                    ValidationErrorType.UNEXPECTED_FIELD,
                    f"{item_type.value} entries must not have '{field}'",
                )

        for field in self.EMPTY_ONLY_FIELDS.get(item_type, ()):
            value = entry.get(field)
            if value is None:
                continue
            if not isinstance(value, list):
                ctx.add(child_path(path, field), ValidationErrorType.INVALID_FIELD_VALUE, f"'{field}' must be a list")
            elif value:
                ctx.add(
                    child_path(path, field),
                    ValidationErrorType.UNEXPECTED_FIELD,
                    f"{item_type.value} entries must not declare {field}",
                )

        if "name" in entry and "name" not in self.FORBIDDEN_FIELDS.get(item_type, ()):
            if not isinstance(entry["name"], str):
                ctx.add(child_path(path, "name"), ValidationErrorType.INVALID_FIELD_VALUE, "'name' must be a string")

        if item_type in FUNCTION_FAMILY:
            self._check_mutability(entry, item_type, path, ctx)
        elif item_type == AbiItemType.EVENT and "anonymous" in entry:
            if not isinstance(entry["anonymous"], bool):
                ctx.add(
                    child_path(path, "anonymous"),
                    ValidationErrorType.INVALID_FIELD_VALUE,
                    "'anonymous' must be a boolean",
                )

        for field in self.PARAMETER_FIELDS.get(item_type, ()):
            if field in entry:
                self._check_parameters(
                    entry[field],
                    child_path(path, field),
                    ctx,
                    allow_indexed=item_type == AbiItemType.EVENT,
                )

    def _check_mutability(self, entry: dict, item_type: AbiItemType, path: str, ctx: ValidationContext) -> None:
        mutability = entry.get("stateMutability")
        if mutability is not None:
            if not isinstance(mutability, str) or mutability not in _STATE_MUTABILITIES:
                ctx.add(
                    child_path(path, "stateMutability"),
                    ValidationErrorType.INVALID_FIELD_VALUE,
                    f"stateMutability must be one of {sorted(_STATE_MUTABILITIES)}, got {mutability!r}",
                )
            elif item_type == AbiItemType.RECEIVE and mutability != StateMutability.PAYABLE.value:
                ctx.add(
                    child_path(path, "stateMutability"),
                    ValidationErrorType.INVALID_FIELD_VALUE,
                    f"receive entries must be payable, got {mutability!r}",
                )

        # Deprecated legacy fields: optional, type-checked only.
        for field in ("constant", "payable"):
            if field in entry and not isinstance(entry[field], bool):
                ctx.add(child_path(path, field), ValidationErrorType.INVALID_FIELD_VALUE, f"'{field}' must be a boolean")
        if "gas" in entry and (isinstance(entry["gas"], bool) or not isinstance(entry["gas"], int)):
            ctx.add(child_path(path, "gas"), ValidationErrorType.INVALID_FIELD_VALUE, "'gas' must be an integer")

    def _check_parameters(self, params: Any, path: str, ctx: ValidationContext, allow_indexed: bool = False) -> None:
        if not isinstance(params, list):
            ctx.add(path, ValidationErrorType.INVALID_FIELD_VALUE, "parameters must be a list")
            return
        for j, param in enumerate(params):
            self._check_parameter(param, index_path(path, j), ctx, allow_indexed)

    def _check_parameter(self, param: Any, path: str, ctx: ValidationContext, allow_indexed: bool) -> None:
        if not isinstance(param, dict):
            ctx.add(path, ValidationErrorType.INVALID_FIELD_VALUE, "parameter must be an object")
            return

        ctx.require_str(param, "name", path)

        if "internalType" in param:
            reason = ctx.grammar.check_internal_type(param["internalType"])
            if reason is not None:
                ctx.add(child_path(path, "internalType"), ValidationErrorType.INVALID_FIELD_VALUE, reason)

        if allow_indexed and "indexed" in param and not isinstance(param["indexed"], bool):
            ctx.add(child_path(path, "indexed"), ValidationErrorType.INVALID_FIELD_VALUE, "'indexed' must be a boolean")

        if "type" not in param:
            ctx.add(child_path(path, "type"), ValidationErrorType.MISSING_REQUIRED_FIELD, "'type' is required")
            self._check_stray_components(param, path, ctx)
            return

        info = ctx.classify(path, param["type"])
        if info.family == SolidityFamily.UNRECOGNIZED:
            # Still report errors nested under components; the type error alone hides them.
            self._check_stray_components(param, path, ctx)
            return

        has_components = "components" in param
        if info.requires_components:
            if not has_components:
                ctx.add(path, ValidationErrorType.MISSING_COMPONENTS, f"'{info.type_str}' requires components")
                return
            # Tuples nest without limit; only array suffix depth is bounded.
            self._check_parameters(param["components"], child_path(path, "components"), ctx)
        elif has_components:
            ctx.add(path, ValidationErrorType.UNEXPECTED_COMPONENTS, f"'{info.type_str}' must not have components")

    def _check_stray_components(self, param: dict, path: str, ctx: ValidationContext) -> None:
        if isinstance(param.get("components"), list):
            self._check_parameters(param["components"], child_path(path, "components"), ctx)


def validate_abi(abi: Any, settings: Settings | None = None) -> ValidationResult:
    """Validate a whole ABI document, collecting every structural error."""
    grammar = AbiGrammar.from_settings(settings) if settings is not None else None
    return AbiValidator(grammar).validate(abi)


def parse_abi(abi: Any, settings: Settings | None = None) -> list[AbiItem]:
    """Validate, then materialize typed entries. Raises AbiValidationError on any structural error."""
    validate_abi(abi, settings).raise_for_errors()
    return AbiAdapter.validate_python(abi)
