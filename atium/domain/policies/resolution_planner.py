# atium/domain/policies/resolution_planner.py
from __future__ import annotations

from typing import Dict, Tuple

from atium.common.logging import get_logger
from atium.domain.enums.resolution import OutputResolution
from atium.domain.errors import InvalidDimension, InvalidRequest

logger = get_logger(__name__)

_DIMENSIONS: Dict[OutputResolution, Tuple[int, int]] = {
    OutputResolution.SD: (640, 480),
    OutputResolution.HD: (1280, 720),
    OutputResolution.FULL_HD: (1920, 1080),
    OutputResolution.FULL_HD_2K: (2048, 1080),
    OutputResolution.ULTRA_HD: (3840, 2160),
    OutputResolution.FULL_ULTRA_HD: (7680, 4320),
}

_ALIASES: Dict[str, OutputResolution] = {
    "480p": OutputResolution.SD,
    "720p": OutputResolution.HD,
    "1080p": OutputResolution.FULL_HD,
    "2k": OutputResolution.FULL_HD_2K,
    "4k": OutputResolution.ULTRA_HD,
    "8k": OutputResolution.FULL_ULTRA_HD,
}


def width_height(resolution: OutputResolution) -> Tuple[int, int]:
    return _DIMENSIONS[resolution]


def parse_resolution(value: str) -> OutputResolution:
    """
    Accepts enum values/names ("hd", "FULL_HD", "full-hd") and the usual
    aliases ("720p", "4k", ...).
    """
    key = (value or "").strip().lower().replace("-", "_")
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return OutputResolution(key)
    except ValueError:
        raise InvalidRequest(f"unknown resolution '{value}'") from None


def _as_dimension(raw: str, axis: str) -> int:
    try:
        n = int(str(raw).strip())
    except ValueError:
        raise InvalidDimension(f"source {axis} '{raw}' is not an integer") from None
    if n <= 0:
        raise InvalidDimension(f"source {axis} must be positive, got {n}")
    return n


def clamp_to_source(resolution: OutputResolution, source_width: str, source_height: str) -> Tuple[int, int]:
    """
    Target dimensions for `resolution`, never larger than the source on
    either axis. Source values come straight from analysis fields.
    """
    width, height = width_height(resolution)
    src_w = _as_dimension(source_width, "width")
    src_h = _as_dimension(source_height, "height")

    clamped = (min(width, src_w), min(height, src_h))
    if clamped != (width, height):
        logger.warning(
            "Requested %s (%dx%d) exceeds source %dx%d; using %dx%d",
            resolution.name, width, height, src_w, src_h, *clamped,
        )
    return clamped
