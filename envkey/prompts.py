"""Terminal prompts for the add-or-update flow."""

from collections.abc import Callable

from envkey.errors import ValidationError
from envkey.models import Outcome, UpsertResult
from envkey.validation import normalize_key, validate_value

_OUTCOME_MESSAGES = {
    Outcome.ADDED: "✅ Variable added.",
    Outcome.UPDATED: "✅ Variable updated.",
    Outcome.CANCELLED: "⛔ Update cancelled.",
}


class TerminalPrompter:
    """Reads answers line by line and prints feedback.

    ``input_fn`` defaults to the builtin ``input``; tests pass a fake.
    Every line read is stripped of surrounding whitespace.
    """

    def __init__(self, input_fn: Callable[[str], str] = input, stream=None):
        self._input = input_fn
        self.stream = stream

    def _read(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _say(self, message: str) -> None:
        print(message, file=self.stream)

    def _ask_until_valid(self, prompt: str, validator: Callable[[str], str]) -> tuple[str, str]:
        while True:
            raw = self._read(prompt)
            try:
                return raw, validator(raw)
            except ValidationError as e:
                self._say(f"❌ Error: {e}")

    def banner(self) -> None:
        self._say("🔐 Safely add a variable to .env")

    def ask_key(self) -> tuple[str, str]:
        """Return (raw, canonical) once the key normalizes cleanly."""
        return self._ask_until_valid(
            "Variable key (for example: db password): ", normalize_key
        )

    def ask_value(self) -> str:
        _, value = self._ask_until_valid(
            "Variable value (Latin characters only): ", validate_value
        )
        return value

    def confirm_overwrite(self, raw_key: str) -> str:
        return self._read(
            f'⚠️  Key "{raw_key}" already exists. Do you want to change its value? (yes/no): '
        )

    def ask_current_value(self, attempt: int, max_attempts: int) -> str:
        return self._read(
            f"Enter the current value to confirm (attempt {attempt} of {max_attempts}): "
        )

    def notify_mismatch(self, attempt: int, max_attempts: int) -> None:
        self._say("❌ Value does not match.")
        if attempt >= max_attempts:
            self._say("⛔ Too many attempts. Update rejected.")

    def report(self, result: UpsertResult) -> None:
        self._say(_OUTCOME_MESSAGES[result.outcome])

    def error(self, message: str) -> None:
        self._say(f"❌ Update failed: {message}")
