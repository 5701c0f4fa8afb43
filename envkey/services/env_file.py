"""Read and write the .env file holding the managed keys."""

import logging
from pathlib import Path

from envkey.errors import EnvFileError

logger = logging.getLogger(__name__)

FILE_MODE = 0o600
# Bytes that are not valid UTF-8 survive a read/write cycle unchanged
ENCODING_ERRORS = "surrogateescape"


def read_env(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict, creating an empty file if missing.

    Blank lines, ``#`` comments and lines without ``=`` are skipped. When a
    key appears more than once the last line wins.
    """
    path = Path(path)
    try:
        if not path.exists():
            path.touch()
        text = path.read_text(encoding="utf-8", errors=ENCODING_ERRORS)
    except OSError as e:
        raise EnvFileError(path, "read", e) from e

    result = {}
    for line in text.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        if "=" in line:
            key, _, value = line.partition("=")
            result[key.strip()] = value.strip()
    logger.debug("Loaded %d entries from %s", len(result), path)
    return result


def write_env(path: Path, values: dict[str, str]) -> None:
    """Replace the contents of a .env file with ``values``.

    Comments and blank lines from the previous contents are not kept. The
    text is encoded before the file is opened, so an unencodable value
    leaves the old contents in place.
    """
    path = Path(path)
    lines = [f"{k}={v}" for k, v in values.items()]
    text = "".join(line + "\n" for line in lines)
    try:
        data = text.encode("utf-8", errors=ENCODING_ERRORS)
    except UnicodeEncodeError as e:
        raise EnvFileError(path, "encode", e) from e
    try:
        path.write_bytes(data)
        path.chmod(FILE_MODE)
    except OSError as e:
        raise EnvFileError(path, "write", e) from e
    logger.debug("Wrote %d entries to %s", len(lines), path)


class EnvFile:
    """A .env file used as the store for upsert()."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> dict[str, str]:
        return read_env(self.path)

    def save(self, values: dict[str, str]) -> None:
        write_env(self.path, values)

    def __repr__(self) -> str:
        return f"EnvFile({str(self.path)!r})"
