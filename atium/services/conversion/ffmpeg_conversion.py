# atium/services/conversion/ffmpeg_conversion.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from atium.common.logging import get_logger
from atium.common.path.output import resolve_output_path
from atium.common.process.gateway import ProcessGateway
from atium.common.settings import Settings, get_settings
from atium.domain.entities.analysis import MediaAnalysis
from atium.domain.enums import InputSourceType, OutputResolution
from atium.domain.errors import AtiumError, ConversionError, InvalidRequest
from atium.domain.policies.resolution_planner import clamp_to_source
from atium.domain.ports.analysis import MediaAnalysisPort
from atium.domain.ports.conversion import ConversionPort
from atium.domain.ports.files import FileOpsPort
from atium.domain.ports.thumbs import ThumbnailPort
from atium.services.analysis.mediainfo_service import MediaInfoAnalysisService
from atium.services.filesystem.local_file_ops import LocalFileOps
from atium.services.schemas.conversion import ConversionRequest, ConversionResponse
from atium.services.schemas.thumbs import ThumbnailResponse
from atium.services.thumbs.ffmpeg_thumbnail import FFmpegThumbnailService

logger = get_logger(__name__)

VIDEO_TRACK = 1


class FFmpegConversionService(ConversionPort):
    """
    Rescale a video with `ffmpeg -vf scale=W:H`, optionally grabbing a
    thumbnail from the converted file afterwards.

    The source is copied to a private temp file first; mediainfo and
    ffmpeg only ever see that copy.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        gateway: Optional[ProcessGateway] = None,
        analysis_service: Optional[MediaAnalysisPort] = None,
        thumbnail_service: Optional[ThumbnailPort] = None,
        file_ops: Optional[FileOpsPort] = None,
    ):
        self.cfg = settings or get_settings()
        self.gateway = gateway or ProcessGateway()
        self.file_ops = file_ops or LocalFileOps()
        tools = self.cfg.tools
        self.handle = self.gateway.probe(tools.ffmpeg_bin, tools.ffmpeg_probe_args)
        self.analysis_service = analysis_service or MediaInfoAnalysisService(self.cfg, gateway=self.gateway)
        self.thumbnail_service = thumbnail_service or FFmpegThumbnailService(
            self.cfg,
            gateway=self.gateway,
            analysis_service=self.analysis_service,
            handle=self.handle,
        )

    # --- helpers -------------------------------------------------------------

    def _load_source_file(self, request: ConversionRequest) -> Path:
        if request.source_type is not InputSourceType.LOCAL:
            raise InvalidRequest(f"unsupported source type '{request.source_type}'")
        paths = self.cfg.paths
        try:
            tmp = self.file_ops.copy_to_temp(Path(request.input_file), temp_dir=paths.temp_dir, suffix=paths.temp_suffix)
        except OSError as e:
            logger.error("Error when trying to copy input file: %s", e)
            raise ConversionError(f"could not copy input file {request.input_file}") from e
        logger.debug("Successfully copied source file to %s", tmp)
        return tmp

    def compute_resolution(self, resolution: OutputResolution, analysis: MediaAnalysis) -> tuple[int, int]:
        width = analysis.extract_field(VIDEO_TRACK, "Width")
        height = analysis.extract_field(VIDEO_TRACK, "Height")
        return clamp_to_source(resolution, width, height)

    @staticmethod
    def build_args(input_file: str, output_file: str, width: int, height: int) -> List[str]:
        return ["-i", input_file, "-vf", f"scale={width}:{height}", output_file]

    def _transcode(self, request: ConversionRequest, source: Path, analysis: MediaAnalysis) -> str:
        resolution = request.resolution or self.cfg.defaults.resolution
        width, height = self.compute_resolution(resolution, analysis)
        logger.debug("Requested resolution is [%dx%d]", width, height)

        paths = self.cfg.paths
        output_file = resolve_output_path(
            request.output_file,
            paths.conversion_ext,
            disambiguator_max=paths.disambiguator_max,
        )

        logger.debug("Converting file at path [%s]", source)
        result = self.gateway.execute(self.handle, self.build_args(str(source), output_file, width, height))
        if not result.success:
            self.gateway.drain(result.stderr)
            raise ConversionError(
                "ffmpeg conversion returned ERROR status",
                stderr=result.stderr.decode("utf-8", "replace"),
                rc=result.returncode,
            )
        return output_file

    def _extract_thumbnail(
        self,
        request: ConversionRequest,
        output_file: str,
        analysis: MediaAnalysis,
    ) -> Optional[ThumbnailResponse]:
        thumb_req = request.thumbnail_request
        if thumb_req is None:
            logger.debug("Thumbnail extraction not requested")
            return None

        # the conversion analysis only describes the converted output
        reuse: Optional[MediaAnalysis] = None
        if not thumb_req.input_file:
            thumb_req = thumb_req.model_copy(update={"input_file": output_file})
            reuse = analysis
        try:
            return self.thumbnail_service.extract_thumbnail(thumb_req, reuse)
        except AtiumError as e:
            logger.error("An error occurred when extracting thumbnail [%s]", e)
            return None

    # --- main ---------------------------------------------------------------

    def convert(self, request: ConversionRequest) -> ConversionResponse:
        source = self._load_source_file(request)
        try:
            analysis = self.analysis_service.analyze(str(source))
            output_file = self._transcode(request, source, analysis)
        finally:
            self.file_ops.remove_file(source)

        logger.info("Converted file available at [%s]", output_file)
        return ConversionResponse(
            output_file=output_file,
            thumbnail_response=self._extract_thumbnail(request, output_file, analysis),
        )
