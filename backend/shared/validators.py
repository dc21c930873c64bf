"""Validation helpers for list-valued settings read from the environment."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic_settings import EnvSettingsSource

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

_EMPTY_MESSAGE = "String list value must not be empty"


def _parse_json_list(raw: str) -> list[str]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON array: {e}") from e
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        raise ValueError("JSON value must be an array of strings")
    return parsed


def parse_string_list(value: str | list[str], *, allow_empty: bool = False) -> list[str]:
    """Parse a list of strings from a settings value.

    Accepts a list (returned unchanged), a JSON array string such as
    '["a","b"]', or a comma-separated string such as 'a,b'. An empty or
    blank string is always rejected; an empty resulting list is rejected
    unless allow_empty is set.
    """
    if isinstance(value, list):
        result = value
    else:
        stripped = value.strip()
        if not stripped:
            raise ValueError(_EMPTY_MESSAGE)
        if stripped.startswith("["):
            result = _parse_json_list(stripped)
        else:
            result = [item.strip() for item in stripped.split(",") if item.strip()]

    if not result and not allow_empty:
        raise ValueError(_EMPTY_MESSAGE)
    return result


class StringListEnvSettingsSource(EnvSettingsSource):
    """Env source that leaves string-list fields as raw strings.

    pydantic-settings JSON-decodes list fields before validators run, which
    would reject the comma-separated form. Fields named in string_list_fields
    reach parse_string_list untouched instead.
    """

    string_list_fields: ClassVar[frozenset[str]] = frozenset({"cors_origins"})

    def prepare_field_value(
        self,
        field_name: str,
        field: FieldInfo,
        value: Any,  # noqa: ANN401
        value_is_complex: bool,  # noqa: FBT001
    ) -> Any:  # noqa: ANN401
        if field_name in self.string_list_fields and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)
