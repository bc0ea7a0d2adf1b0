import pytest

from abitype.config import Settings
from abitype.grammar.arrays import ArrayTypeBuilder
from abitype.grammar.classifier import AbiGrammar


@pytest.fixture()
def grammar() -> AbiGrammar:
    """Default configuration: lengths 1..99, unbounded depth (classification only)."""
    return AbiGrammar.from_settings(Settings(_env_file=None))


@pytest.fixture()
def bounded_grammar() -> AbiGrammar:
    return AbiGrammar(arrays=ArrayTypeBuilder(min_length=1, max_length=3, max_depth=2))
