from enum import Enum


class AbiItemType(str, Enum):
    """Discriminant of a top-level ABI entry."""

    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    FALLBACK = "fallback"
    RECEIVE = "receive"
    EVENT = "event"
    ERROR = "error"


class StateMutability(str, Enum):
    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"
