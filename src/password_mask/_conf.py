from typing import Annotated

import annotated_types
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import DEFAULT_SPECIAL_ALPHABET


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="PASSWORD_MASK_",
    )

    special_alphabet: Annotated[str, Field(min_length=1)] = "".join(
        DEFAULT_SPECIAL_ALPHABET
    )
    secure_random: bool = True
    default_count: Annotated[int, annotated_types.Ge(1)] = 1

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
