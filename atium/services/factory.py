# atium/services/factory.py
from __future__ import annotations

from typing import Optional

from atium.common.logging import get_logger
from atium.common.settings import Settings
from atium.domain.enums import AnalysisEngine, ConversionEngine
from atium.domain.ports.analysis import MediaAnalysisPort
from atium.domain.ports.conversion import ConversionPort
from atium.domain.ports.thumbs import ThumbnailPort
from atium.services.analysis.mediainfo_service import MediaInfoAnalysisService
from atium.services.conversion.ffmpeg_conversion import FFmpegConversionService
from atium.services.thumbs.ffmpeg_thumbnail import FFmpegThumbnailService

logger = get_logger(__name__)


def build_analysis_service(
    engine: AnalysisEngine = AnalysisEngine.MEDIAINFO,
    settings: Optional[Settings] = None,
) -> MediaAnalysisPort:
    """
    Return the analysis implementation for `engine`.

    Raises UnavailableTool / ProbeFailed when the backing binary is unusable.
    """
    if engine is AnalysisEngine.MEDIAINFO:
        logger.debug("Creating a new MEDIAINFO service")
        return MediaInfoAnalysisService(settings)
    raise ValueError(f"Unsupported analysis engine: {engine}")


def build_thumbnail_service(
    engine: ConversionEngine = ConversionEngine.FFMPEG,
    settings: Optional[Settings] = None,
) -> ThumbnailPort:
    if engine is ConversionEngine.FFMPEG:
        logger.debug("Creating a new FFMPEG thumbnail service")
        return FFmpegThumbnailService(settings)
    raise ValueError(f"Unsupported thumbnail engine: {engine}")


def build_conversion_service(
    engine: ConversionEngine = ConversionEngine.FFMPEG,
    settings: Optional[Settings] = None,
) -> ConversionPort:
    if engine is ConversionEngine.FFMPEG:
        logger.debug("Creating a new FFMPEG conversion service")
        return FFmpegConversionService(settings)
    raise ValueError(f"Unsupported conversion engine: {engine}")
