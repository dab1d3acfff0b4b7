from typing import Optional

from pydantic import BaseModel, Field


class MaskDescription(BaseModel):
    rules: list[str] = Field(default_factory=list)
    required_characters: list[str] = Field(default_factory=list)
    min_length: int = 0
    allowed_character_types: list[str] = Field(default_factory=list)
    error: Optional[str] = None
