from abitype.domain.models.abi import (
    AbiAdapter,
    AbiConstructor,
    AbiError,
    AbiEvent,
    AbiEventParameter,
    AbiFallback,
    AbiFunction,
    AbiItem,
    AbiParameter,
    AbiReceive,
)
from abitype.domain.models.type_info import AbiTypeInfo
from abitype.domain.models.typed_data import TypedDataAdapter, TypedDataDomain, TypedDataParameter
from abitype.domain.models.validation import AbiValidationError, ValidationIssue, ValidationResult

__all__ = [
    "AbiAdapter",
    "AbiConstructor",
    "AbiError",
    "AbiEvent",
    "AbiEventParameter",
    "AbiFallback",
    "AbiFunction",
    "AbiItem",
    "AbiParameter",
    "AbiReceive",
    "AbiTypeInfo",
    "AbiValidationError",
    "TypedDataAdapter",
    "TypedDataDomain",
    "TypedDataParameter",
    "ValidationIssue",
    "ValidationResult",
]
