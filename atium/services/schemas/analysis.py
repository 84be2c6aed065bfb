# atium/services/schemas/analysis.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from atium.domain.enums import InfoFormat, InfoOutputType


class AnalysisRequest(BaseModel):
    input: str = Field(..., min_length=1, examples=["/path/to/video.mp4"])
    # None -> settings.defaults.analysis_format / analysis_full / analysis_output_mode
    format: Optional[InfoFormat] = None
    full: Optional[bool] = None
    # FILE mode only; "" or None -> random name. Extension is appended.
    output_file: Optional[str] = None
    output_type: Optional[InfoOutputType] = None


class AnalysisResponse(BaseModel):
    file: Optional[str] = None      # set in FILE mode
    content: Optional[str] = None   # set in PLAIN mode


def parse_info_format(value: Optional[str]) -> Optional[InfoFormat]:
    """'json' | 'html' | 'xml' (any case); unknown -> JSON, None -> None."""
    if value is None:
        return None
    try:
        return InfoFormat(value.strip().upper())
    except ValueError:
        return InfoFormat.JSON


def parse_output_mode(value: Optional[str]) -> Optional[InfoOutputType]:
    """'std' | 'file' | 'plain' (any case); unknown -> STDOUT, None -> None."""
    if value is None:
        return None
    try:
        return InfoOutputType(value.strip().lower())
    except ValueError:
        return InfoOutputType.STDOUT
