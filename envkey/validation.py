"""Key normalization and value validation."""

import re

from envkey.errors import ForbiddenScriptError, InvalidCharactersError

KEY_SUFFIX = "_KEY"

_KEY_PATTERN = re.compile(r"[A-Z_]+")
# Basic Cyrillic block plus yo, which sits outside the а-я range
_CYRILLIC_PATTERN = re.compile(r"[а-яА-ЯёЁ]")


def normalize_key(raw: str) -> str:
    """Turn user input like ``" db password "`` into ``DB_PASSWORD_KEY``.

    Raises InvalidCharactersError if anything other than ASCII letters,
    spaces and underscores is left after trimming.
    """
    key = raw.strip().replace(" ", "_").upper()
    if not _KEY_PATTERN.fullmatch(key):
        raise InvalidCharactersError(raw)
    if not key.endswith(KEY_SUFFIX):
        key += KEY_SUFFIX
    return key


def validate_value(raw: str) -> str:
    """Return the trimmed value, rejecting Cyrillic text."""
    value = raw.strip()
    if _CYRILLIC_PATTERN.search(value):
        raise ForbiddenScriptError()
    return value
