from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    address_pattern: str = r"^0x[0-9a-fA-F]{40}$"  # AddressType
    bytes_pattern: str = r"^0x[0-9a-fA-F]*$"  # BytesType
    fixed_array_min_length: int = 1
    fixed_array_max_length: int = 99
    array_max_depth: int | bool = False  # False = unbounded, classify only
    debug: bool = False

    @field_validator("array_max_depth")
    @classmethod
    def _check_depth(cls, value: int | bool) -> int | bool:
        if value is True:
            raise ValueError("array_max_depth must be a non-negative integer or false")
        if value is not False and value < 0:
            raise ValueError("array_max_depth must be a non-negative integer or false")
        return value

    @model_validator(mode="after")
    def _check_lengths(self) -> "Settings":
        if self.fixed_array_min_length < 0:
            raise ValueError("fixed_array_min_length must be >= 0")
        if self.fixed_array_min_length > self.fixed_array_max_length:
            raise ValueError("fixed_array_min_length must not exceed fixed_array_max_length")
        return self

    @property
    def depth_bounded(self) -> bool:
        return self.array_max_depth is not False

    class Config:
        env_prefix = "ABITYPE_"
        env_file = ".env"


settings = Settings()
