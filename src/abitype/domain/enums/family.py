from enum import Enum


class SolidityFamily(str, Enum):
    """Primitive families a type string can belong to. Array forms keep their base family."""

    ADDRESS = "address"
    BOOL = "bool"
    BYTES = "bytes"
    FUNCTION = "function"
    INT = "int"
    STRING = "string"
    TUPLE = "tuple"
    UNRECOGNIZED = "unrecognized"
