"""AbiGrammar — primitive grammar + array builder behind one classify() call."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from abitype.domain.models.type_info import AbiTypeInfo
from abitype.grammar.arrays import ArrayTypeBuilder
from abitype.grammar.primitives import classify_primitive, unrecognized

if TYPE_CHECKING:
    from abitype.config import Settings

DEFAULT_ADDRESS_PATTERN = r"^0x[0-9a-fA-F]{40}$"
DEFAULT_BYTES_PATTERN = r"^0x[0-9a-fA-F]*$"

# internalType may name the Solidity-level type instead of the ABI one.
INTERNAL_TYPE_PREFIXES = ("address ", "contract ", "enum ", "struct ")


class AbiGrammar:
    """Immutable, shareable classifier for ABI type strings."""

    def __init__(
        self,
        arrays: ArrayTypeBuilder | None = None,
        address_pattern: str = DEFAULT_ADDRESS_PATTERN,
        bytes_pattern: str = DEFAULT_BYTES_PATTERN,
    ) -> None:
        self.arrays = arrays or ArrayTypeBuilder()
        self._address_re = re.compile(address_pattern)
        self._bytes_re = re.compile(bytes_pattern)

    @classmethod
    def from_settings(cls, settings: Settings) -> AbiGrammar:
        return cls(
            arrays=ArrayTypeBuilder(
                min_length=settings.fixed_array_min_length,
                max_length=settings.fixed_array_max_length,
                max_depth=settings.array_max_depth,
            ),
            address_pattern=settings.address_pattern,
            bytes_pattern=settings.bytes_pattern,
        )

    def classify(self, type_str: Any) -> AbiTypeInfo:
        """Classify a type string, array forms included. Never raises."""
        if not isinstance(type_str, str):
            return unrecognized(repr(type_str), f"type must be a string, got {type(type_str).__name__}")

        try:
            base, dimensions = self.arrays.split(type_str)
        except ValueError as exc:
            return unrecognized(type_str, str(exc))

        info = classify_primitive(base)
        if not info.is_valid:
            return info.model_copy(update={"type_str": type_str})

        update: dict[str, Any] = {"type_str": type_str, "dimensions": dimensions}
        problem = self.arrays.check_dimensions(dimensions)
        if problem is not None:
            update["error_type"], update["reason"] = problem
        return info.model_copy(update=update)

    def is_abi_type(self, type_str: Any) -> bool:
        return self.classify(type_str).is_valid

    def is_typed_data_type(self, type_str: Any) -> bool:
        return self.classify(type_str).is_typed_data_type

    def check_internal_type(self, internal_type: Any) -> str | None:
        """Return a reason when internal_type is neither an ABI type nor a prefixed Solidity type name."""
        if not isinstance(internal_type, str):
            return f"internalType must be a string, got {type(internal_type).__name__}"
        if internal_type.startswith(INTERNAL_TYPE_PREFIXES):
            return None
        info = self.classify(internal_type)
        if info.is_valid:
            return None
        return f"'{internal_type}' is not an ABI type or a prefixed address/contract/enum/struct name"

    def is_address(self, value: Any) -> bool:
        return isinstance(value, str) and self._address_re.match(value) is not None

    def is_bytes(self, value: Any) -> bool:
        return isinstance(value, str) and self._bytes_re.match(value) is not None


@lru_cache(maxsize=1)
def default_grammar() -> AbiGrammar:
    """Grammar built from the process-wide settings (ABITYPE_* environment)."""
    from abitype.config import settings

    return AbiGrammar.from_settings(settings)


def classify_type(type_str: Any) -> AbiTypeInfo:
    return default_grammar().classify(type_str)
