"""Error types surfaced by rp commands."""

from __future__ import annotations


class RpError(RuntimeError):
    """Base error for rp; carries an optional remediation hint."""

    exit_code = 1

    def __init__(self, message: str, *, hint: str | None = None):
        super().__init__(message)
        self.hint = hint


class HomeDirectoryError(RpError):
    """Raised when the user's home directory cannot be resolved."""


class StorageError(RpError):
    """Raised when a playground directory cannot be created or removed."""


class ExternalProcessError(RpError):
    """Raised when an external command fails to launch or exits non-zero."""


class ConfigError(RpError):
    """Raised when rp.yaml is malformed."""


class ValidationError(RpError):
    """Raised for invalid user input (usage, selection, filters)."""

    exit_code = 2
