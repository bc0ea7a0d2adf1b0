"""TypedDataValidator — EIP-712 struct graphs and domains.

https://eips.ethereum.org/EIPS/eip-712#definition-of-typed-structured-data-%F0%9D%95%8A
"""

import logging
from typing import Any

from abitype.config import Settings
from abitype.domain.enums import ValidationErrorType
from abitype.domain.models.typed_data import TypedDataAdapter, TypedDataDomain, TypedDataParameter
from abitype.domain.models.validation import ValidationResult
from abitype.grammar.classifier import AbiGrammar
from abitype.grammar.primitives import classify_primitive
from abitype.validation.base import BaseValidator
from abitype.validation.context import ValidationContext, child_path, index_path

logger = logging.getLogger(__name__)

DOMAIN_FIELDS = ("chainId", "name", "salt", "verifyingContract", "version")
SALT_BYTES = 32


class TypedDataValidator(BaseValidator):
    """Struct names form a directed graph; self and mutual references are legal, so no cycle check."""

    VALIDATOR_NAME = "TypedDataValidator"

    def validate(self, document: Any, domain: Any = None) -> ValidationResult:
        ctx = self._new_context()

        if not isinstance(document, dict):
            ctx.add("types", ValidationErrorType.INVALID_FIELD_VALUE, "typed data types must be a mapping")
        else:
            self._check_types(document, ctx)

        if domain is not None:
            self._check_domain(domain, ctx)

        result = ctx.result()
        struct_count = len(document) if isinstance(document, dict) else 0
        logger.debug("Validated typed data: %d structs, %d errors", struct_count, len(result.errors))
        return result

    def _check_types(self, types: dict, ctx: ValidationContext) -> None:
        struct_names = {name for name in types if isinstance(name, str)}
        for struct_name, params in types.items():
            path = child_path("types", str(struct_name))
            if self.grammar.is_typed_data_type(struct_name):
                ctx.add(
                    path,
                    ValidationErrorType.RESERVED_STRUCT_NAME,
                    f"struct name '{struct_name}' collides with a primitive type",
                )
            if not isinstance(params, list):
                ctx.add(path, ValidationErrorType.INVALID_FIELD_VALUE, "struct fields must be a list")
                continue
            for j, param in enumerate(params):
                self._check_parameter(param, index_path(path, j), struct_names, ctx)

    def _check_parameter(self, param: Any, path: str, struct_names: set[str], ctx: ValidationContext) -> None:
        if not isinstance(param, dict):
            ctx.add(path, ValidationErrorType.INVALID_FIELD_VALUE, "struct field must be an object")
            return
        ctx.require_str(param, "name", path)
        type_str = ctx.require_str(param, "type", path)
        if type_str is None:
            return

        type_path = child_path(path, "type")
        info = self.grammar.classify(type_str)
        if info.is_valid:
            if info.is_typed_data_type:
                ctx.record_type(path, info)
            else:
                ctx.add(
                    type_path,
                    ValidationErrorType.UNRECOGNIZED_TYPE,
                    f"'{type_str}' is not allowed in typed data",
                )
            return

        try:
            base, _ = self.grammar.arrays.split(type_str)
        except ValueError as exc:
            ctx.add(type_path, ValidationErrorType.UNRECOGNIZED_TYPE, str(exc))
            return

        if classify_primitive(base).is_valid:
            # Primitive base with bad suffixes, e.g. too deep or an out-of-range length.
            ctx.add(type_path, info.error_type or ValidationErrorType.UNRECOGNIZED_TYPE, info.reason or "")
        elif base not in struct_names:
            ctx.add(
                type_path,
                ValidationErrorType.UNKNOWN_STRUCT_REFERENCE,
                f"'{base}' is neither an EIP-712 type nor a struct defined in types",
            )

    def _check_domain(self, domain: Any, ctx: ValidationContext) -> None:
        if not isinstance(domain, dict):
            ctx.add("domain", ValidationErrorType.INVALID_FIELD_VALUE, "domain must be an object")
            return

        for key in domain:
            if key not in DOMAIN_FIELDS:
                ctx.add(child_path("domain", str(key)), ValidationErrorType.UNEXPECTED_FIELD, f"unknown domain field '{key}'")

        def invalid(key: str, message: str) -> None:
            ctx.add(child_path("domain", key), ValidationErrorType.INVALID_FIELD_VALUE, message)

        chain_id = domain.get("chainId")
        if chain_id is not None and (isinstance(chain_id, bool) or not isinstance(chain_id, (str, int))):
            invalid("chainId", "chainId must be a string or an integer")

        for key in ("name", "version"):
            value = domain.get(key)
            if value is not None and not isinstance(value, str):
                invalid(key, f"{key} must be a string")

        salt = domain.get("salt")
        if salt is not None and not self._is_salt(salt):
            invalid("salt", f"salt must be a {SALT_BYTES}-byte value")

        contract = domain.get("verifyingContract")
        if contract is not None and not self.grammar.is_address(contract):
            invalid("verifyingContract", "verifyingContract must be an address")

    def _is_salt(self, value: Any) -> bool:
        if isinstance(value, bytes):
            return len(value) == SALT_BYTES
        return self.grammar.is_bytes(value) and len(value) == 2 + SALT_BYTES * 2


def validate_typed_data(types: Any, domain: Any = None, settings: Settings | None = None) -> ValidationResult:
    grammar = AbiGrammar.from_settings(settings) if settings is not None else None
    return TypedDataValidator(grammar).validate(types, domain)


def parse_typed_data(
    types: Any,
    domain: Any = None,
    settings: Settings | None = None,
) -> tuple[dict[str, list[TypedDataParameter]], TypedDataDomain | None]:
    """Validate, then materialize typed models. Raises AbiValidationError on any structural error."""
    validate_typed_data(types, domain, settings).raise_for_errors()
    parsed_domain = TypedDataDomain.model_validate(domain) if domain is not None else None
    return TypedDataAdapter.validate_python(types), parsed_domain
