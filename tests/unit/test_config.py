import pytest
from pydantic import ValidationError

from abitype.config import Settings
from abitype.grammar.classifier import AbiGrammar


class TestSettingsDefaults:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.fixed_array_min_length == 1
        assert s.fixed_array_max_length == 99
        assert s.array_max_depth is False
        assert s.depth_bounded is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ABITYPE_ARRAY_MAX_DEPTH", "2")
        monkeypatch.setenv("ABITYPE_FIXED_ARRAY_MAX_LENGTH", "10")
        s = Settings(_env_file=None)
        assert s.array_max_depth == 2
        assert s.fixed_array_max_length == 10
        assert s.depth_bounded is True

    def test_env_false_means_unbounded(self, monkeypatch):
        monkeypatch.setenv("ABITYPE_ARRAY_MAX_DEPTH", "false")
        assert Settings(_env_file=None).array_max_depth is False


class TestSettingsValidation:
    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, fixed_array_min_length=10, fixed_array_max_length=5)

    def test_negative_min_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, fixed_array_min_length=-1)

    def test_true_depth_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, array_max_depth=True)

    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, array_max_depth=-2)


class TestGrammarFromSettings:
    def test_per_consumer_override(self):
        grammar = AbiGrammar.from_settings(
            Settings(_env_file=None, fixed_array_min_length=0, fixed_array_max_length=4, array_max_depth=1)
        )
        assert grammar.arrays.fixed_lengths() == (0, 1, 2, 3, 4)
        assert grammar.classify("uint8[0]").is_valid
        assert not grammar.classify("uint8[5]").is_valid
        assert not grammar.classify("uint8[][]").is_valid
