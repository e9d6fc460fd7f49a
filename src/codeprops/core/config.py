"""Configuration model for the code meta transform.

CodePropsOptions

`tag_name` (`"code" | "pre"`, alias `tagName`)
: Element receiving the meta attributes. With ``"pre"`` (default) the
  attributes go to the ``<pre>`` wrapping the code element, provided the
  ``<pre>`` has no other child. With ``"code"`` they go to the ``<code>``
  element itself.

`attribute_name_case` (`"html" | "react"`, alias `attributeNameCase`)
: Spelling of the existing element attributes. ``"react"`` (default) emits
  ``className``/``htmlFor``; ``"html"`` emits ``class``/``for``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .exceptions import ConfigurationError


TAG_NAMES = ("code", "pre")
ATTRIBUTE_NAME_CASES = ("html", "react")
_ALIASES = {"tag_name": "tagName", "attribute_name_case": "attributeNameCase"}


class CodePropsOptions(BaseModel):
    """Options accepted by :func:`codeprops.code_props`."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    tag_name: str = Field(default="pre", alias="tagName")
    attribute_name_case: str = Field(default="react", alias="attributeNameCase")

    @field_validator("tag_name", mode="before")
    @classmethod
    def _check_tag_name(cls, value: Any) -> Any:
        if value not in TAG_NAMES:
            raise PydanticCustomError(
                "tag_name",
                "Expected tagName to be 'code' or 'pre', got: {value}",
                {"value": value},
            )
        return value

    @field_validator("attribute_name_case", mode="before")
    @classmethod
    def _check_attribute_name_case(cls, value: Any) -> Any:
        if value not in ATTRIBUTE_NAME_CASES:
            raise PydanticCustomError(
                "attribute_name_case",
                "Expected attributeNameCase to be 'html' or 'react', got: {value}",
                {"value": value},
            )
        return value


def load_options(
    options: CodePropsOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> CodePropsOptions:
    """Validate options, raising :class:`ConfigurationError` on bad input.

    ``None`` values are treated as "not provided" so callers can forward
    optional keyword arguments untouched.
    """
    if isinstance(options, CodePropsOptions):
        payload: dict[str, Any] = options.model_dump(by_alias=True)
    else:
        payload = {_ALIASES.get(key, key): value for key, value in (options or {}).items()}
    payload.update(
        {_ALIASES.get(key, key): value for key, value in overrides.items() if value is not None}
    )

    try:
        return CodePropsOptions.model_validate(payload)
    except ValidationError as exc:
        messages = []
        for error in exc.errors():
            if error["type"] in {"tag_name", "attribute_name_case"}:
                messages.append(error["msg"])
            else:
                location = ".".join(str(part) for part in error["loc"])
                messages.append(f"{location}: {error['msg']}")
        raise ConfigurationError("; ".join(messages)) from exc


__all__ = ["ATTRIBUTE_NAME_CASES", "TAG_NAMES", "CodePropsOptions", "load_options"]
