"""Primitive (non-array) ABI type grammar.

See https://docs.soliditylang.org/en/latest/abi-spec.html#types
"""

import re

from abitype.domain.enums import SolidityFamily, ValidationErrorType
from abitype.domain.models.type_info import AbiTypeInfo
from abitype.grammar.ranges import BIT_WIDTHS, BYTE_WIDTHS

LITERAL_TYPES: dict[str, SolidityFamily] = {
    "address": SolidityFamily.ADDRESS,
    "bool": SolidityFamily.BOOL,
    "function": SolidityFamily.FUNCTION,
    "string": SolidityFamily.STRING,
    "tuple": SolidityFamily.TUPLE,
}

# Widths never carry a leading zero: "bytes01" is not "bytes1".
_BYTES_RE = re.compile(r"^bytes([1-9][0-9]*)?$")
_INT_RE = re.compile(r"^(u?)int([1-9][0-9]*)?$")
# Recognized only to give a precise reason; solidity#409 has not shipped fixed-point yet.
_FIXED_RE = re.compile(r"^u?fixed([0-9]+x[0-9]+)?$")

_BYTE_WIDTH_SET = frozenset(BYTE_WIDTHS)
_BIT_WIDTH_SET = frozenset(BIT_WIDTHS)


def unrecognized(type_str: str, reason: str) -> AbiTypeInfo:
    return AbiTypeInfo(
        type_str=type_str,
        family=SolidityFamily.UNRECOGNIZED,
        error_type=ValidationErrorType.UNRECOGNIZED_TYPE,
        reason=reason,
    )


def classify_primitive(type_str: str) -> AbiTypeInfo:
    """Classify a non-array type string. Never raises; unknown input yields an UNRECOGNIZED result."""
    family = LITERAL_TYPES.get(type_str)
    if family is not None:
        return AbiTypeInfo(type_str=type_str, family=family, base=type_str)

    match = _BYTES_RE.match(type_str)
    if match:
        width = match.group(1)
        if width is None:
            return AbiTypeInfo(type_str=type_str, family=SolidityFamily.BYTES, base=type_str)
        size = int(width)
        if size not in _BYTE_WIDTH_SET:
            return unrecognized(type_str, f"bytes width must be between 1 and 32, got {size}")
        return AbiTypeInfo(type_str=type_str, family=SolidityFamily.BYTES, base=type_str, size=size)

    match = _INT_RE.match(type_str)
    if match:
        signed = match.group(1) == ""
        width = match.group(2)
        if width is None:
            return AbiTypeInfo(type_str=type_str, family=SolidityFamily.INT, base=type_str, signed=signed)
        bits = int(width)
        if bits not in _BIT_WIDTH_SET:
            return unrecognized(type_str, f"integer width must be a multiple of 8 between 8 and 256, got {bits}")
        return AbiTypeInfo(type_str=type_str, family=SolidityFamily.INT, base=type_str, signed=signed, size=bits)

    if _FIXED_RE.match(type_str):
        return unrecognized(type_str, "fixed-point types are not supported")

    return unrecognized(type_str, f"'{type_str}' is not an ABI type")


def primitive_type_names() -> list[str]:
    """Every valid non-array type string, bare widths included."""
    names = list(LITERAL_TYPES)
    names.append("bytes")
    names.extend(f"bytes{m}" for m in BYTE_WIDTHS)
    for prefix in ("int", "uint"):
        names.append(prefix)
        names.extend(f"{prefix}{m}" for m in BIT_WIDTHS)
    return names
