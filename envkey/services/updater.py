"""Add or update a key, asking for confirmation before overwriting."""

import hmac
import logging
from typing import Protocol

from envkey.models import Outcome, UpsertResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
AFFIRMATIVE = "yes"


class Store(Protocol):
    def load(self) -> dict[str, str]: ...

    def save(self, values: dict[str, str]) -> None: ...


class Prompter(Protocol):
    def confirm_overwrite(self, raw_key: str) -> str: ...

    def ask_current_value(self, attempt: int, max_attempts: int) -> str: ...

    def notify_mismatch(self, attempt: int, max_attempts: int) -> None: ...


def _confirm_current_value(
    current: str, prompter: Prompter, max_attempts: int
) -> tuple[bool, int]:
    """Ask the user to retype the stored value.

    Returns (matched, attempts_used).
    """
    for attempt in range(1, max_attempts + 1):
        entered = prompter.ask_current_value(attempt, max_attempts)
        if hmac.compare_digest(entered.encode(), current.encode()):
            return True, attempt
        prompter.notify_mismatch(attempt, max_attempts)
    return False, max_attempts


def upsert(
    store: Store,
    raw_key: str,
    key: str,
    value: str,
    prompter: Prompter,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> UpsertResult:
    """Set ``key`` to ``value`` in the store.

    A new key is written straight away. An existing key is only replaced
    after the user answers "yes" and then retypes the current value within
    ``max_attempts`` tries; otherwise nothing is written. ``raw_key`` is the
    text the user typed and is only used in the confirmation prompt.

    EnvFileError from the store propagates unchanged.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    values = store.load()

    if key not in values:
        values[key] = value
        store.save(values)
        logger.info("Added %s=***", key)
        return UpsertResult(Outcome.ADDED, key)

    answer = prompter.confirm_overwrite(raw_key)
    if answer.strip().lower() != AFFIRMATIVE:
        logger.info("Update of %s declined", key)
        return UpsertResult(Outcome.CANCELLED, key)

    matched, attempts = _confirm_current_value(values[key], prompter, max_attempts)
    if not matched:
        logger.warning("Update of %s rejected after %d failed attempts", key, attempts)
        return UpsertResult(Outcome.CANCELLED, key, attempts)

    values[key] = value
    store.save(values)
    logger.info("Updated %s=***", key)
    return UpsertResult(Outcome.UPDATED, key, attempts)
