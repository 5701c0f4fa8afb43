"""Exceptions raised by envkey."""


class EnvKeyError(Exception):
    """Base exception for all envkey errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ValidationError(EnvKeyError, ValueError):
    """User input was rejected. Recoverable: the prompt asks again."""


class InvalidCharactersError(ValidationError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            "Key may only contain Latin letters, spaces and underscores",
            "no digits or special characters",
        )


class ForbiddenScriptError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "Value must not contain Cyrillic letters",
            "use Latin characters only",
        )


class EnvFileError(EnvKeyError):
    """The .env file could not be read or written."""

    def __init__(self, path, action: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"Could not {action} {path}: {reason}")
