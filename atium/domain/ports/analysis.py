from __future__ import annotations
from typing import TYPE_CHECKING, Protocol

from atium.domain.entities.analysis import MediaAnalysis

if TYPE_CHECKING:
    from atium.services.schemas.analysis import AnalysisRequest, AnalysisResponse


class MediaAnalysisPort(Protocol):
    def get_info(self, request: AnalysisRequest) -> AnalysisResponse: ...

    def analyze(self, input_path: str) -> MediaAnalysis: ...
