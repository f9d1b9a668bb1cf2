"""
Shared field validators for Pydantic schemas.

Exported documents from older catalog versions contain nulls where the
current schema expects empty strings, and booleans written as strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import field_validator


def empty_if_none(v: Any) -> Any:
    """
    Normalize a nullable text value.

    Returns empty string if value is None.
    """
    if v is None:
        return ""
    return v


def parse_bool_field(v: Any) -> Any:
    """
    Parse a boolean field value from common string spellings.
    """
    if isinstance(v, str):
        lowered = v.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0", ""}:
            return False
    return v


class TextFieldsMixin:
    """
    Mixin that turns None into "" for every plain text field.

    Subclasses list their text fields in ``__text_fields__``; fields that
    are absent from a subclass are skipped.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, v, info):
        if info.field_name in getattr(cls, "__text_fields__", ()):
            return empty_if_none(v)
        return v
