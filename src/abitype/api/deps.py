from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from abitype.container import Container
from abitype.grammar.classifier import AbiGrammar
from abitype.validation.abi import AbiValidator
from abitype.validation.typed_data import TypedDataValidator


@inject
def get_grammar(grammar: AbiGrammar = Depends(Provide[Container.grammar])) -> AbiGrammar:
    return grammar


def get_abi_validator(grammar: AbiGrammar = Depends(get_grammar)) -> AbiValidator:
    return AbiValidator(grammar)


def get_typed_data_validator(grammar: AbiGrammar = Depends(get_grammar)) -> TypedDataValidator:
    return TypedDataValidator(grammar)
