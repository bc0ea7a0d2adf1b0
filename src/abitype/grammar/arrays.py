"""Array type builder: fixed (`T[N]`) and dynamic (`T[]`) suffixes up to a configured depth."""

import re
from collections.abc import Iterator

from abitype.domain.enums import ValidationErrorType
from abitype.grammar.primitives import primitive_type_names
from abitype.grammar.ranges import inclusive_range

_SUFFIXES_RE = re.compile(r"^(?P<base>[^\[\]]*)(?P<suffixes>(?:\[[^\[\]]*\])*)$")
_SUFFIX_RE = re.compile(r"\[([^\[\]]*)\]")
_LENGTH_RE = re.compile(r"^(0|[1-9][0-9]*)$")


class ArrayTypeBuilder:
    """Derives and recognizes array-suffixed forms of a base type.

    With a bounded max_depth every form can be enumerated. With max_depth=False the
    set is infinite, so only structural classification is offered.
    """

    def __init__(self, min_length: int = 1, max_length: int = 99, max_depth: int | bool = False) -> None:
        if max_depth is True or (max_depth is not False and max_depth < 0):
            raise ValueError(f"max_depth must be a non-negative integer or False, got {max_depth!r}")
        self.min_length = min_length
        self.max_length = max_length
        self.max_depth = max_depth
        if min_length < 0 or min_length > max_length:
            raise ValueError(f"invalid fixed array length range {min_length}..{max_length}")

    @property
    def bounded(self) -> bool:
        return self.max_depth is not False

    def fixed_lengths(self) -> tuple[int, ...]:
        """Materialized on demand; classification only reads min_length/max_length."""
        return inclusive_range(self.min_length, self.max_length)

    def suffixes(self) -> list[str]:
        """Every single suffix: dynamic first, then each permitted fixed length."""
        return ["[]"] + [f"[{n}]" for n in self.fixed_lengths()]

    def build(self, base: str) -> Iterator[str]:
        """Enumerate array forms of base depth-first.

        Depth 0 yields only the bare base. Otherwise yields every form carrying
        1..max_depth suffixes (the bare base is not an array form).
        """
        if not self.bounded:
            raise ValueError("cannot enumerate array types with unbounded depth; use split/check_dimensions")
        if self.max_depth == 0:
            yield base
            return
        yield from self._extend(base, 0, self.suffixes())

    def _extend(self, prefix: str, depth: int, suffixes: list[str]) -> Iterator[str]:
        for suffix in suffixes:
            form = prefix + suffix
            yield form
            if depth + 1 < self.max_depth:
                yield from self._extend(form, depth + 1, suffixes)

    def build_without_tuple(self) -> Iterator[str]:
        for name in primitive_type_names():
            if name != "tuple":
                yield from self.build(name)

    def build_with_tuple(self) -> Iterator[str]:
        yield from self.build("tuple")

    def split(self, type_str: str) -> tuple[str, tuple[int | None, ...]]:
        """Split "T[2][]" into ("T", (2, None)). Raises ValueError on malformed brackets or lengths."""
        match = _SUFFIXES_RE.match(type_str)
        if match is None:
            raise ValueError(f"malformed array suffix in '{type_str}'")
        dimensions: list[int | None] = []
        for raw in _SUFFIX_RE.findall(match.group("suffixes")):
            if raw == "":
                dimensions.append(None)
            elif _LENGTH_RE.match(raw):
                dimensions.append(int(raw))
            else:
                raise ValueError(f"array length must be a non-negative integer, got '{raw}'")
        return match.group("base"), tuple(dimensions)

    def check_dimensions(self, dimensions: tuple[int | None, ...]) -> tuple[ValidationErrorType, str] | None:
        """Return (error_type, reason) when the suffixes break the configured bounds, else None."""
        if not self.bounded:
            return None
        if len(dimensions) > self.max_depth:
            return (
                ValidationErrorType.ARRAY_DEPTH_EXCEEDED,
                f"array depth {len(dimensions)} exceeds maximum of {self.max_depth}",
            )
        for length in dimensions:
            if length is not None and not self.min_length <= length <= self.max_length:
                return (
                    ValidationErrorType.UNRECOGNIZED_TYPE,
                    f"fixed array length {length} outside {self.min_length}..{self.max_length}",
                )
        return None

    def is_tuple_form(self, type_str: str) -> bool:
        """True for "tuple" and its array forms, the ones that require components."""
        try:
            base, _ = self.split(type_str)
        except ValueError:
            return False
        return base == "tuple"
