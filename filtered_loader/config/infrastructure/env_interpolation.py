"""${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from collections.abc import Callable
from typing import TypeAlias

# group 1: variable name, group 2: fallback (None when no ":-" is present)
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and has no fallback, in order."""
    missing: list[str] = []

    def _note(text: str) -> str:
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, fallback = match.group(1), match.group(2)
            if fallback is None and name not in os.environ and name not in missing:
                missing.append(name)
        return text

    _walk(data, _note)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every reference substituted.

    Unset variables without a fallback must have been rejected beforehand via
    collect_missing_vars; reaching one here raises KeyError.
    """
    return _walk(data, lambda text: _ENV_VAR_PATTERN.sub(_substitute, text))


def _substitute(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    if fallback is not None:
        return os.environ.get(name, fallback)
    return os.environ[name]


def _walk(data: RawValue, on_string: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return on_string(data)
    if isinstance(data, list):
        return [_walk(item, on_string) for item in data]
    if isinstance(data, dict):
        return {key: _walk(value, on_string) for key, value in data.items()}
    return data
