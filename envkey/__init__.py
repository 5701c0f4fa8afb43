"""envkey - guarded add-or-update of *_KEY variables in a .env file."""

__version__ = "0.1.0"

from envkey.errors import (
    EnvFileError,
    EnvKeyError,
    ForbiddenScriptError,
    InvalidCharactersError,
)
from envkey.models import Outcome, UpsertResult
from envkey.services.env_file import EnvFile, read_env, write_env
from envkey.services.updater import upsert
from envkey.validation import normalize_key, validate_value

__all__ = [
    "EnvFile",
    "EnvFileError",
    "EnvKeyError",
    "ForbiddenScriptError",
    "InvalidCharactersError",
    "Outcome",
    "UpsertResult",
    "normalize_key",
    "read_env",
    "upsert",
    "validate_value",
    "write_env",
]
