"""Validation of the positional `<latitude> <longitude> [language]` arguments."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import InvalidArgumentError

DEFAULT_LANGUAGE = "en"
MAX_LANGUAGE_LENGTH = 5


@dataclass(frozen=True, slots=True)
class Options:
    """Validated location and language for one forecast request."""

    latitude: float
    longitude: float
    language: str = DEFAULT_LANGUAGE


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_bounded_number(field: str, text: str, minimum: float, maximum: float) -> float:
    label = field.capitalize()
    # Plain ASCII decimal or exponent notation only.
    if not _DECIMAL_RE.fullmatch(text.strip()):
        raise InvalidArgumentError(
            f"An invalid {field} ({text!r}) was provided.", field=field, value=text
        )
    value = float(text)
    if not (minimum <= value <= maximum):
        raise InvalidArgumentError(
            f"{label} {text} is out of range; expected between {minimum:g} and {maximum:g}.",
            field=field,
            value=text,
        )
    return value


def _parse_language(text: str) -> str:
    language = text.strip()
    if not language:
        raise InvalidArgumentError(
            "Language must not be blank.", field="language", value=text
        )
    if len(language) > MAX_LANGUAGE_LENGTH:
        raise InvalidArgumentError(
            f"Language {text!r} is too long; expected at most {MAX_LANGUAGE_LENGTH} characters.",
            field="language",
            value=text,
        )
    return language


def parse_options(args: Sequence[str]) -> Options:
    """Validate raw positional arguments and build Options.

    Accepts exactly `lat lon` or `lat lon lang`. Any violation raises
    InvalidArgumentError naming the offending field.
    """
    if len(args) not in (2, 3):
        raise InvalidArgumentError(
            f"Expected <latitude> <longitude> [language], got {len(args)} argument(s).",
            field="arguments",
            value=list(args),
        )

    latitude = _parse_bounded_number("latitude", args[0], -90, 90)
    longitude = _parse_bounded_number("longitude", args[1], -180, 180)
    if len(args) == 2:
        return Options(latitude=latitude, longitude=longitude)
    return Options(latitude=latitude, longitude=longitude, language=_parse_language(args[2]))
