# atium/services/thumbs/ffmpeg_thumbnail.py
from __future__ import annotations

from typing import List, Optional

from atium.common.logging import get_logger
from atium.common.path.output import resolve_output_path
from atium.common.process.gateway import ProcessGateway, ToolHandle
from atium.common.settings import Settings, get_settings
from atium.domain.entities.analysis import MediaAnalysis
from atium.domain.errors import ConversionError, InvalidRequest
from atium.domain.policies.timestamp_policy import source_duration, validate_timestamp
from atium.domain.ports.analysis import MediaAnalysisPort
from atium.domain.ports.thumbs import ThumbnailPort
from atium.services.analysis.mediainfo_service import MediaInfoAnalysisService
from atium.services.schemas.thumbs import ThumbnailRequest, ThumbnailResponse

logger = get_logger(__name__)


class FFmpegThumbnailService(ThumbnailPort):
    """Single-frame extraction with `ffmpeg -ss <ts> -vframes 1`."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        gateway: Optional[ProcessGateway] = None,
        analysis_service: Optional[MediaAnalysisPort] = None,
        handle: Optional[ToolHandle] = None,
    ):
        self.cfg = settings or get_settings()
        self.gateway = gateway or ProcessGateway()
        tools = self.cfg.tools
        self.handle = handle or self.gateway.probe(tools.ffmpeg_bin, tools.ffmpeg_probe_args)
        self._analysis_service = analysis_service

    @property
    def analysis_service(self) -> MediaAnalysisPort:
        # mediainfo is only probed the first time a duration is actually needed
        if self._analysis_service is None:
            self._analysis_service = MediaInfoAnalysisService(self.cfg, gateway=self.gateway)
        return self._analysis_service

    @staticmethod
    def build_args(input_file: str, output_file: str, timestamp: str) -> List[str]:
        return ["-i", input_file, "-ss", timestamp, "-vframes", "1", output_file]

    def compute_timestamp(self, requested: Optional[str], input_file: str, analysis: Optional[MediaAnalysis]) -> str:
        defaults = self.cfg.defaults
        requested = requested or defaults.thumbnail_timestamp
        if analysis is None:
            analysis = self.analysis_service.analyze(input_file)
        duration = source_duration(analysis, default=defaults.source_duration)
        return validate_timestamp(requested, duration, fallback=defaults.fallback_timestamp)

    def extract_thumbnail(
        self,
        request: ThumbnailRequest,
        analysis: Optional[MediaAnalysis] = None,
    ) -> ThumbnailResponse:
        if not request.input_file:
            raise InvalidRequest("thumbnail extraction needs an input file")
        input_file = request.input_file

        paths = self.cfg.paths
        output_file = resolve_output_path(
            request.output_file or f"{input_file}.{paths.thumbnail_ext}",
            paths.thumbnail_ext,
            disambiguator_max=paths.disambiguator_max,
        )
        timestamp = self.compute_timestamp(request.timestamp, input_file, analysis)

        result = self.gateway.execute(self.handle, self.build_args(input_file, output_file, timestamp))
        if not result.success:
            self.gateway.drain(result.stderr)
            raise ConversionError(
                "ffmpeg thumbnail extraction returned ERROR status",
                stderr=result.stderr.decode("utf-8", "replace"),
                rc=result.returncode,
            )

        logger.info("Thumbnail extracted at path [%s]", output_file)
        return ThumbnailResponse(output_path=output_file)
