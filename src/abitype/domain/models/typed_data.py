"""EIP-712 typed data structures."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TypedDataDomain(BaseModel):
    """All fields optional; an empty domain is valid."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    chain_id: str | int | None = Field(None, alias="chainId")
    name: str | None = None
    salt: str | bytes | None = None
    verifying_contract: str | None = Field(None, alias="verifyingContract")
    version: str | None = None


class TypedDataParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str  # primitive, struct name, or struct name with array suffixes


TypedDataAdapter: TypeAdapter[dict[str, list[TypedDataParameter]]] = TypeAdapter(
    dict[str, list[TypedDataParameter]]
)
