from __future__ import annotations
from pathlib import Path
from typing import Protocol


class FileOpsPort(Protocol):
    def copy_to_temp(self, src: Path, *, temp_dir: Path, suffix: str) -> Path: ...

    def remove_file(self, path: Path) -> bool: ...

    def write_bytes(self, path: Path, data: bytes) -> Path: ...
