# atium/common/process/gateway.py
from __future__ import annotations

import shlex
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from atium.common.logging import get_logger
from atium.domain.errors import ExecutionFailed, OutputError, ProbeFailed, UnavailableTool

logger = get_logger(__name__)

Sink = Callable[[str], object]
Writer = Callable[[bytes], object]


@dataclass(frozen=True)
class ToolHandle:
    """A command name that answered its probe successfully."""
    command: str


@dataclass(frozen=True)
class ExecutionResult:
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class ProcessGateway:
    """
    Thin wrapper around `subprocess.run` for the external media tools.

    One blocking invocation per call, no retries and no timeout. A non-zero
    exit status is *not* an error here: callers inspect `ExecutionResult`
    themselves (mediainfo, for one, reports failures on stdout).
    """

    def __init__(self, sink: Optional[Sink] = None, writer: Optional[Writer] = None):
        self.sink: Sink = sink or print
        self.writer: Writer = writer or _write_stdout

    # ---- lifecycle ------------------------------------------------------------
    def probe(self, tool: str, probe_args: Sequence[str] = ()) -> ToolHandle:
        logger.debug("Loading a new command %s", tool)
        try:
            proc = subprocess.run([tool, *probe_args], capture_output=True, check=False)
        except OSError as e:
            raise UnavailableTool(f"could not launch '{tool}'", stderr=str(e)) from e

        if proc.returncode != 0:
            raise ProbeFailed(
                f"'{tool}' probe returned non-zero exit code",
                stderr=proc.stderr.decode("utf-8", "replace"),
                rc=proc.returncode,
            )
        return ToolHandle(command=tool)

    def execute(self, handle: ToolHandle, args: Sequence[str]) -> ExecutionResult:
        cmd = [handle.command, *map(str, args)]
        logger.debug("exec: %s", shlex.join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as e:
            raise ExecutionFailed(f"could not execute '{handle.command}'", stderr=str(e)) from e

        return ExecutionResult(returncode=proc.returncode, stdout=proc.stdout or b"", stderr=proc.stderr or b"")

    # ---- output helpers -------------------------------------------------------
    @staticmethod
    def output_as_text(data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputError("command output is not valid UTF-8") from e

    def stream(self, data: bytes) -> None:
        """Hand a captured stream to the writer byte for byte."""
        self.writer(data)

    def drain(self, data: bytes) -> None:
        """Push every line of a diagnostics stream to the sink (undecodable bytes replaced)."""
        for line in data.decode("utf-8", "replace").splitlines():
            self.sink(line)


def _write_stdout(data: bytes) -> None:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
