# atium/domain/enums/engines.py
from __future__ import annotations

from enum import StrEnum


class AnalysisEngine(StrEnum):
    MEDIAINFO = "mediainfo"


class ConversionEngine(StrEnum):
    FFMPEG = "ffmpeg"


class InputSourceType(StrEnum):
    LOCAL = "local"
