# atium/domain/errors.py
from __future__ import annotations

from typing import Optional


class AtiumError(Exception):
    """
    Base error for everything atium surfaces to its caller.
    `stderr` / `rc` are attached when a subprocess was involved.
    """

    label = "Error"

    def __init__(self, message: str, *, stderr: Optional[str] = None, rc: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.stderr = stderr
        self.rc = rc

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


# ---- tool lifecycle -----------------------------------------------------------
class UnavailableTool(AtiumError):
    """The executable could not be launched at all (not installed / not on PATH)."""
    label = "Unavailable Tool"


class ProbeFailed(AtiumError):
    """The executable launched but the probe invocation exited non-zero."""
    label = "Probe Failed"


class ExecutionFailed(AtiumError):
    label = "Execution Failed"


class CommandError(AtiumError):
    """The process ran but reported failure through its exit status."""
    label = "Command Error"


class ConversionError(CommandError):
    label = "Conversion Error"


# ---- analysis document --------------------------------------------------------
class MalformedAnalysis(AtiumError):
    label = "Malformed Analysis"


class TrackNotFound(AtiumError):
    label = "Track Not Found"


class FieldNotFound(AtiumError):
    label = "Field Not Found"


# ---- derived values -----------------------------------------------------------
class InvalidDimension(AtiumError):
    label = "Invalid Dimension"


class InvalidTimestamp(AtiumError):
    label = "Invalid Timestamp"


# ---- requests / outputs -------------------------------------------------------
class InvalidRequest(AtiumError):
    label = "Invalid Request"


class OutputError(AtiumError):
    label = "I/O Error"
