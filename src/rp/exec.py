"""Command runners for scaffolding and editor processes."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from rp.errors import ExternalProcessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecResult:
    """Result envelope for subprocess execution."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class ExecError(ExternalProcessError):
    """Raised when a command returns non-zero in check mode."""

    def __init__(self, result: ExecResult, *, hint: str | None = None):
        rendered = " ".join(result.argv)
        detail = (result.stderr or result.stdout).strip()
        message = f"command failed ({result.returncode}): {rendered}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message, hint=hint)
        self.result = result


def run_command(
    argv: list[str],
    *,
    capture: bool = True,
    check: bool = True,
) -> ExecResult:
    """Run command and return structured result.

    With ``capture=False`` the child inherits the terminal, so its own
    progress output stays visible and ``stdout``/``stderr`` are empty.
    """
    logger.debug("exec: %s", " ".join(argv))
    try:
        completed = subprocess.run(argv, capture_output=capture, text=True, check=False)
    except OSError as exc:
        raise ExternalProcessError(f"unable to run {argv[0]}: {exc}") from exc

    result = ExecResult(
        argv=tuple(argv),
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if check and result.returncode != 0:
        raise ExecError(result)
    return result
