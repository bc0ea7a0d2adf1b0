from dependency_injector import containers, providers

from abitype.config import Settings
from abitype.grammar.classifier import AbiGrammar
from abitype.validation.abi import AbiValidator
from abitype.validation.typed_data import TypedDataValidator


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["abitype.api.deps"])

    settings = providers.Singleton(Settings)

    grammar = providers.Singleton(
        AbiGrammar.from_settings,
        settings=settings,
    )

    abi_validator = providers.Factory(AbiValidator, grammar=grammar)

    typed_data_validator = providers.Factory(TypedDataValidator, grammar=grammar)
