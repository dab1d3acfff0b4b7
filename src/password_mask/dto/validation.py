from typing import Optional

from pydantic import BaseModel, Field


class ValidationDetails(BaseModel):
    length: int
    min_length: int
    allowed_chars: list[str]
    required_chars: list[str]
    found_required_chars: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """
    Outcome of checking a password against a mask.

    ``details`` is ``None`` only when the mask itself could not be parsed, in which
    case ``errors`` holds the single parse error message.
    """

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    details: Optional[ValidationDetails] = None
