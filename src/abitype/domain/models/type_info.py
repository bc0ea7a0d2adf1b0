"""Decomposed shape of a classified ABI type string."""

from pydantic import BaseModel, computed_field

from abitype.domain.enums import SolidityFamily, ValidationErrorType
from abitype.grammar.ranges import DEFAULT_INT_BITS


class AbiTypeInfo(BaseModel):
    """Result of classifying one type string. Unrecognized strings carry error_type + reason instead of raising."""

    model_config = {"frozen": True}

    type_str: str
    family: SolidityFamily
    base: str = ""  # primitive part without array suffixes, e.g. "uint256"
    signed: bool | None = None  # only set for the int family
    size: int | None = None  # bytes for bytesM, bits for (u)intM; None when bare
    dimensions: tuple[int | None, ...] = ()  # written order; None = dynamic "[]"
    error_type: ValidationErrorType | None = None
    reason: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return self.family != SolidityFamily.UNRECOGNIZED and self.error_type is None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def depth(self) -> int:
        return len(self.dimensions)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_array(self) -> bool:
        return bool(self.dimensions)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def requires_components(self) -> bool:
        """Tuple and tuple-array parameters must carry a components list."""
        return self.family == SolidityFamily.TUPLE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_tuple(self) -> bool:
        return self.family == SolidityFamily.TUPLE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_typed_data_type(self) -> bool:
        """EIP-712 does not model tuples or function pointers."""
        return self.is_valid and self.family not in (SolidityFamily.FUNCTION, SolidityFamily.TUPLE)

    @property
    def effective_size(self) -> int | None:
        """Bare int/uint mean 256 bits; bare bytes is dynamic and has no size."""
        if self.family == SolidityFamily.INT:
            return self.size or DEFAULT_INT_BITS
        return self.size

    @property
    def element_type(self) -> str | None:
        """Type string of one element for array forms, e.g. "uint8[2]" for "uint8[2][]"."""
        if not self.dimensions:
            return None
        return self.base + "".join(_suffix(d) for d in self.dimensions[:-1])


def _suffix(length: int | None) -> str:
    return "[]" if length is None else f"[{length}]"
