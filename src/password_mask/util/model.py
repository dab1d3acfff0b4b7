from typing import Any

import pydantic
import pydantic_core

__all__ = ("convert_errors", "format_errors", "model_dump_json")


CUSTOM_TYPES = {
    "model_type": "mapping_type",
    "dict_type": "mapping_type",
    "extra_forbidden": "extra_field",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/#model_type
    "mapping_type": "Input must be a valid mapping",
    "extra_field": "Extra fields not allowed",
    "missing": "Field is required",
    "string_too_short": "Value must have at least {min_length} character",
    "greater_than_equal": "Value must be greater than or equal to {ge}",
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []
    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type
        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message
        if ctx:
            # we don't want to show the context to the user
            del error["ctx"]

        new_errors.append(error)
    return new_errors


def format_errors(errors: list[pydantic_core.ErrorDetails]) -> str:
    """
    Example::

        [{'type': 'missing', 'loc': ('a', 'b'), 'msg': 'Field is required', ...}]

        # => "  * a.b: Field is required"
    """
    return "\n".join(
        "  * %s: %s" % (".".join(map(str, error["loc"])) or "<root>", error["msg"])
        for error in errors
    )


def model_dump_json(obj: Any, **kwargs: Any) -> str:
    return pydantic.RootModel(obj).model_dump_json(**kwargs)
