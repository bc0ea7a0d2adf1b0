import pytest

from abitype.domain.enums import SolidityFamily, ValidationErrorType
from abitype.grammar.primitives import classify_primitive, primitive_type_names


class TestLiteralTypes:
    @pytest.mark.parametrize(
        "type_str,family",
        [
            ("address", SolidityFamily.ADDRESS),
            ("bool", SolidityFamily.BOOL),
            ("function", SolidityFamily.FUNCTION),
            ("string", SolidityFamily.STRING),
            ("tuple", SolidityFamily.TUPLE),
        ],
    )
    def test_literal(self, type_str, family):
        info = classify_primitive(type_str)
        assert info.is_valid
        assert info.family == family
        assert info.base == type_str
        assert info.size is None

    def test_case_sensitive(self):
        assert not classify_primitive("Address").is_valid


class TestBytes:
    @pytest.mark.parametrize("m", range(1, 33))
    def test_fixed_bytes_valid(self, m):
        info = classify_primitive(f"bytes{m}")
        assert info.is_valid
        assert info.family == SolidityFamily.BYTES
        assert info.size == m

    def test_dynamic_bytes(self):
        info = classify_primitive("bytes")
        assert info.is_valid
        assert info.size is None
        assert info.effective_size is None

    @pytest.mark.parametrize("type_str", ["bytes0", "bytes33", "bytes64", "bytes01", "bytes-1", "bytesx"])
    def test_invalid_bytes(self, type_str):
        info = classify_primitive(type_str)
        assert not info.is_valid
        assert info.family == SolidityFamily.UNRECOGNIZED
        assert info.error_type == ValidationErrorType.UNRECOGNIZED_TYPE


class TestIntegers:
    @pytest.mark.parametrize("m", range(8, 257, 8))
    def test_uint_and_int_valid(self, m):
        unsigned = classify_primitive(f"uint{m}")
        signed = classify_primitive(f"int{m}")
        assert unsigned.is_valid and signed.is_valid
        assert unsigned.family == signed.family == SolidityFamily.INT
        assert unsigned.signed is False
        assert signed.signed is True
        assert unsigned.size == m

    def test_bare_int_defaults_to_256(self):
        for type_str in ("int", "uint"):
            info = classify_primitive(type_str)
            assert info.is_valid
            assert info.size is None
            assert info.effective_size == 256

    @pytest.mark.parametrize("type_str", ["uint7", "uint264", "int7", "int264", "uint0", "int12", "uint08"])
    def test_invalid_widths(self, type_str):
        info = classify_primitive(type_str)
        assert not info.is_valid
        assert "integer width" in info.reason or "not an ABI type" in info.reason


class TestUnrecognized:
    def test_fixed_point_not_supported(self):
        info = classify_primitive("ufixed128x18")
        assert not info.is_valid
        assert info.reason == "fixed-point types are not supported"

    @pytest.mark.parametrize("type_str", ["", "uint256 ", "Person", "address payable", "int256[]"])
    def test_returns_tagged_result_instead_of_raising(self, type_str):
        info = classify_primitive(type_str)
        assert info.family == SolidityFamily.UNRECOGNIZED
        assert info.reason


class TestPrimitiveTypeNames:
    def test_every_name_classifies(self):
        names = primitive_type_names()
        assert all(classify_primitive(n).is_valid for n in names)

    def test_count(self):
        # 5 literals + bytes + 32 bytesM + 2 * (bare + 32 widths)
        assert len(primitive_type_names()) == 5 + 1 + 32 + 2 * 33
