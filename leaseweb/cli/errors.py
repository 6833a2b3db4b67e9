"""CLI failures and the process exit codes they map to."""

from __future__ import annotations

EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_AUTH = 3
EXIT_NOT_FOUND = 4
EXIT_UNAVAILABLE = 5


class CLIError(Exception):
    """A failure with a message meant for the user; printed as `Error: <message>`."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int = EXIT_ERROR,
        error_type: str = "error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.error_type = error_type

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def usage_error(message: str) -> CLIError:
    return CLIError(message, exit_code=EXIT_USAGE, error_type="usage_error")


def config_error(message: str) -> CLIError:
    return CLIError(message, exit_code=EXIT_USAGE, error_type="config_error")
