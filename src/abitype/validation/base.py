"""Base validator interface."""

from abc import ABC, abstractmethod
from typing import Any

from abitype.domain.models.validation import ValidationResult
from abitype.grammar.classifier import AbiGrammar, default_grammar
from abitype.validation.context import ValidationContext


class BaseValidator(ABC):
    """Minimal interface all document validators implement."""

    VALIDATOR_NAME: str = "BaseValidator"

    def __init__(self, grammar: AbiGrammar | None = None) -> None:
        self.grammar = grammar or default_grammar()

    @abstractmethod
    def validate(self, document: Any) -> ValidationResult:
        """Walk the whole document and return every structural issue found."""

    def _new_context(self) -> ValidationContext:
        return ValidationContext(self.grammar)
