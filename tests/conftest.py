# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import pytest

from atium.common.process.gateway import ExecutionResult, ProcessGateway, ToolHandle
from atium.common.settings import DefaultsConfig, PathsConfig, Settings, ToolsConfig

FIXTURES = Path(__file__).parent / "fixtures"

Scripted = Union[ExecutionResult, Exception, Callable[[List[str]], ExecutionResult]]


class FakeGateway(ProcessGateway):
    """
    Test double for ProcessGateway: records probes/executions and replays
    scripted results per command (FIFO; the last entry repeats).
    """

    def __init__(self, scripted: Optional[Dict[str, List[Scripted]]] = None, probe_errors: Optional[Dict[str, Exception]] = None):
        self.lines: List[str] = []
        self.written: List[bytes] = []
        super().__init__(sink=self.lines.append, writer=self.written.append)
        self.scripted: Dict[str, List[Scripted]] = {k: list(v) for k, v in (scripted or {}).items()}
        self.probe_errors = dict(probe_errors or {})
        self.probes: List[tuple[str, List[str]]] = []
        self.calls: List[tuple[str, List[str]]] = []

    def probe(self, tool: str, probe_args: Sequence[str] = ()) -> ToolHandle:
        self.probes.append((tool, list(probe_args)))
        if tool in self.probe_errors:
            raise self.probe_errors[tool]
        return ToolHandle(command=tool)

    def execute(self, handle: ToolHandle, args: Sequence[str]) -> ExecutionResult:
        args = list(args)
        self.calls.append((handle.command, args))
        queue = self.scripted.get(handle.command) or [ExecutionResult(0)]
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(args)
        return item

    def calls_for(self, command: str) -> List[List[str]]:
        return [a for c, a in self.calls if c == command]


def analysis_json(tracks: List[Dict[str, Any]]) -> bytes:
    return json.dumps({"media": {"track": tracks}}).encode("utf-8")


@pytest.fixture()
def info_json_bytes() -> bytes:
    return (FIXTURES / "info.json").read_bytes()


@pytest.fixture()
def info_json_path() -> Path:
    return FIXTURES / "info.json"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    tmp_dir = tmp_path / "tmp"
    tmp_dir.mkdir()
    return Settings(
        tools=ToolsConfig(),
        defaults=DefaultsConfig(),
        paths=PathsConfig(temp_dir=tmp_dir),
    )


@pytest.fixture()
def make_gateway() -> Callable[..., FakeGateway]:
    return FakeGateway


@pytest.fixture()
def make_analysis_json() -> Callable[[List[Dict[str, Any]]], bytes]:
    return analysis_json
