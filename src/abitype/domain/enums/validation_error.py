from enum import Enum


class ValidationErrorType(str, Enum):
    """Categorized structural errors reported by the validators."""

    UNRECOGNIZED_TYPE = "UnrecognizedType"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    UNEXPECTED_FIELD = "UnexpectedField"
    INVALID_FIELD_VALUE = "InvalidFieldValue"
    UNEXPECTED_COMPONENTS = "UnexpectedComponents"
    MISSING_COMPONENTS = "MissingComponents"
    ARRAY_DEPTH_EXCEEDED = "ArrayDepthExceeded"
    UNKNOWN_STRUCT_REFERENCE = "UnknownStructReference"
    RESERVED_STRUCT_NAME = "ReservedStructName"
