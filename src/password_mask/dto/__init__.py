from .description import MaskDescription
from .policy import ClassRule, PolicyConfig
from .validation import ValidationDetails, ValidationResult

__all__ = (
    "ClassRule",
    "MaskDescription",
    "PolicyConfig",
    "ValidationDetails",
    "ValidationResult",
)
