# atium/domain/enums/analysis.py
from __future__ import annotations

from enum import StrEnum


class InfoFormat(StrEnum):
    """Output formats the analysis tool can emit."""
    JSON = "JSON"
    HTML = "HTML"
    XML = "XML"

    @property
    def extension(self) -> str:
        return f".{self.value.lower()}"


class InfoOutputType(StrEnum):
    STDOUT = "std"    # stream raw output to stdout
    FILE = "file"     # write raw output to a file
    PLAIN = "plain"   # hand the output back as a string
