import pytest

from abitype.domain.enums import ValidationErrorType
from abitype.grammar.arrays import ArrayTypeBuilder


class TestConstruction:
    def test_defaults(self):
        builder = ArrayTypeBuilder()
        assert builder.min_length == 1
        assert builder.max_length == 99
        assert builder.bounded is False

    def test_invalid_length_range(self):
        with pytest.raises(ValueError):
            ArrayTypeBuilder(min_length=5, max_length=2)

    def test_negative_min_length(self):
        with pytest.raises(ValueError):
            ArrayTypeBuilder(min_length=-1)

    def test_huge_length_range_is_not_materialized(self):
        builder = ArrayTypeBuilder(max_length=10**12)
        assert builder.split("uint8[5000000000]") == ("uint8", (5000000000,))
        assert builder.check_dimensions((5000000000,)) is None
        assert ArrayTypeBuilder(max_length=10**12, max_depth=1).check_dimensions((10**12,)) is None

    @pytest.mark.parametrize("depth", [-1, True])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValueError):
            ArrayTypeBuilder(max_depth=depth)


class TestFixedLengths:
    def test_bounded_enumeration(self):
        builder = ArrayTypeBuilder(min_length=2, max_length=4)
        assert builder.fixed_lengths() == (2, 3, 4)

    def test_suffixes_dynamic_first(self):
        builder = ArrayTypeBuilder(min_length=1, max_length=2)
        assert builder.suffixes() == ["[]", "[1]", "[2]"]


class TestBuild:
    def test_depth_zero_yields_bare_base(self):
        builder = ArrayTypeBuilder(max_depth=0)
        assert list(builder.build("uint8")) == ["uint8"]

    def test_depth_one(self):
        builder = ArrayTypeBuilder(min_length=1, max_length=2, max_depth=1)
        assert list(builder.build("bool")) == ["bool[]", "bool[1]", "bool[2]"]

    def test_depth_two_is_depth_first(self):
        builder = ArrayTypeBuilder(min_length=1, max_length=1, max_depth=2)
        assert list(builder.build("address")) == [
            "address[]",
            "address[][]",
            "address[][1]",
            "address[1]",
            "address[1][]",
            "address[1][1]",
        ]

    def test_form_count(self):
        builder = ArrayTypeBuilder(min_length=1, max_length=3, max_depth=3)
        # 4 suffix choices per level: 4 + 16 + 64
        assert len(list(builder.build("string"))) == 4 + 16 + 64

    def test_unbounded_refuses_enumeration(self):
        builder = ArrayTypeBuilder(max_depth=False)
        with pytest.raises(ValueError):
            list(builder.build("uint256"))

    def test_tuple_and_non_tuple_sets_disjoint(self):
        builder = ArrayTypeBuilder(min_length=1, max_length=1, max_depth=1)
        with_tuple = set(builder.build_with_tuple())
        without_tuple = set(builder.build_without_tuple())
        assert with_tuple == {"tuple[]", "tuple[1]"}
        assert not with_tuple & without_tuple
        assert "uint256[1]" in without_tuple
        assert all(builder.is_tuple_form(t) for t in with_tuple)
        assert not any(builder.is_tuple_form(t) for t in without_tuple)


class TestSplit:
    def test_no_suffix(self):
        assert ArrayTypeBuilder().split("uint256") == ("uint256", ())

    def test_mixed_suffixes(self):
        assert ArrayTypeBuilder().split("bytes32[3][]") == ("bytes32", (3, None))

    def test_zero_length_is_syntactically_valid(self):
        assert ArrayTypeBuilder().split("uint8[0]") == ("uint8", (0,))

    @pytest.mark.parametrize("type_str", ["uint8[", "uint8]", "uint8[a]", "uint8[-1]", "uint8[01]", "uint8[[1]]", "uint8[1]x"])
    def test_malformed(self, type_str):
        with pytest.raises(ValueError):
            ArrayTypeBuilder().split(type_str)


class TestCheckDimensions:
    def test_unbounded_accepts_anything_well_formed(self):
        builder = ArrayTypeBuilder(max_depth=False)
        assert builder.check_dimensions((None,) * 20) is None
        assert builder.check_dimensions((0, 1000)) is None

    def test_depth_exceeded(self):
        builder = ArrayTypeBuilder(max_depth=2)
        error_type, reason = builder.check_dimensions((None, None, None))
        assert error_type == ValidationErrorType.ARRAY_DEPTH_EXCEEDED
        assert "3" in reason

    def test_length_out_of_range(self):
        builder = ArrayTypeBuilder(min_length=1, max_length=99, max_depth=2)
        error_type, _ = builder.check_dimensions((100,))
        assert error_type == ValidationErrorType.UNRECOGNIZED_TYPE
        assert builder.check_dimensions((0,)) is not None

    def test_within_bounds(self):
        builder = ArrayTypeBuilder(min_length=0, max_length=5, max_depth=2)
        assert builder.check_dimensions((0, None)) is None
