# atium/services/analysis/mediainfo_service.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from atium.common.logging import get_logger
from atium.common.naming.tokens import unique_token
from atium.common.process.gateway import ExecutionResult, ProcessGateway
from atium.common.settings import Settings, get_settings
from atium.domain.entities.analysis import MediaAnalysis, parse_analysis
from atium.domain.enums import InfoFormat, InfoOutputType
from atium.domain.errors import CommandError
from atium.domain.ports.analysis import MediaAnalysisPort
from atium.domain.ports.files import FileOpsPort
from atium.services.filesystem.local_file_ops import LocalFileOps
from atium.services.schemas.analysis import AnalysisRequest, AnalysisResponse

logger = get_logger(__name__)


class MediaInfoAnalysisService(MediaAnalysisPort):
    """
    Media analysis backed by the `mediainfo` CLI.
    Construction probes the binary and fails if it is missing or broken.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        gateway: Optional[ProcessGateway] = None,
        file_ops: Optional[FileOpsPort] = None,
    ):
        self.cfg = settings or get_settings()
        self.gateway = gateway or ProcessGateway()
        self.file_ops = file_ops or LocalFileOps()
        tools = self.cfg.tools
        self.handle = self.gateway.probe(tools.mediainfo_bin, tools.mediainfo_probe_args)

    # --- helpers -------------------------------------------------------------

    @staticmethod
    def build_args(input_path: str, fmt: InfoFormat, full: bool) -> List[str]:
        args = [f"--output={fmt.value}"]
        if full:
            args.append("--full")
        args.append(input_path)
        return args

    def _run(self, input_path: str, fmt: InfoFormat, full: bool) -> ExecutionResult:
        result = self.gateway.execute(self.handle, self.build_args(input_path, fmt, full))
        if not result.success:
            # mediainfo writes its diagnostics to stdout, not stderr
            self.gateway.drain(result.stdout)
            raise CommandError("mediainfo returned ERROR status", rc=result.returncode)
        return result

    def _write_to_file(self, data: bytes, target: Optional[str], fmt: InfoFormat) -> str:
        name = target or unique_token()
        path = self.file_ops.write_bytes(Path(name + fmt.extension), data)
        logger.debug("Successfully wrote info to file %s", path)
        return str(path)

    # --- main ---------------------------------------------------------------

    def get_info(self, request: AnalysisRequest) -> AnalysisResponse:
        defaults = self.cfg.defaults
        fmt = request.format or defaults.analysis_format
        full = defaults.analysis_full if request.full is None else request.full
        mode = request.output_type or defaults.analysis_output_mode

        result = self._run(request.input, fmt, full)

        if mode is InfoOutputType.FILE:
            return AnalysisResponse(file=self._write_to_file(result.stdout, request.output_file, fmt))
        if mode is InfoOutputType.PLAIN:
            return AnalysisResponse(content=self.gateway.output_as_text(result.stdout))

        self.gateway.stream(result.stdout)
        return AnalysisResponse()

    def analyze(self, input_path: str) -> MediaAnalysis:
        """Run a JSON analysis of `input_path` and parse it into tracks."""
        result = self._run(input_path, InfoFormat.JSON, self.cfg.defaults.analysis_full)
        analysis = parse_analysis(result.stdout)
        logger.debug("Analysis of %s done: %d track(s)", input_path, len(analysis.tracks))
        return analysis
