from abitype.domain.enums.abi_item import AbiItemType, StateMutability
from abitype.domain.enums.family import SolidityFamily
from abitype.domain.enums.validation_error import ValidationErrorType

__all__ = [
    "AbiItemType",
    "SolidityFamily",
    "StateMutability",
    "ValidationErrorType",
]
