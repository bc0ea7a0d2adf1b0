"""Typed views of ABI documents, built after structural validation succeeds."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from abitype.domain.enums import StateMutability


class AbiParameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str
    name: str
    internal_type: str | None = Field(None, alias="internalType")  # representation used by solc
    components: list[AbiParameter] | None = None


class AbiEventParameter(AbiParameter):
    indexed: bool | None = None


class _FunctionFamily(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    state_mutability: StateMutability = Field(alias="stateMutability")
    # Deprecated: superseded by stateMutability (solidity#992) and Vyper gas estimates.
    constant: bool | None = None
    payable: bool | None = None
    gas: int | None = None


class AbiFunction(_FunctionFamily):
    type: Literal["function"]
    name: str
    inputs: list[AbiParameter]
    outputs: list[AbiParameter]


class AbiConstructor(_FunctionFamily):
    type: Literal["constructor"]
    inputs: list[AbiParameter]


class AbiFallback(_FunctionFamily):
    type: Literal["fallback"]
    inputs: list[AbiParameter] = []


class AbiReceive(_FunctionFamily):
    type: Literal["receive"]


class AbiEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["event"]
    name: str
    inputs: list[AbiEventParameter]
    anonymous: bool | None = None


class AbiError(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["error"]
    name: str
    inputs: list[AbiParameter]


AbiItem = Annotated[
    Union[AbiFunction, AbiConstructor, AbiFallback, AbiReceive, AbiEvent, AbiError],
    Field(discriminator="type"),
]

AbiAdapter: TypeAdapter[list[AbiItem]] = TypeAdapter(list[AbiItem])
