from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol

from atium.domain.entities.analysis import MediaAnalysis

if TYPE_CHECKING:
    from atium.services.schemas.thumbs import ThumbnailRequest, ThumbnailResponse


class ThumbnailPort(Protocol):
    def extract_thumbnail(
        self,
        request: ThumbnailRequest,
        analysis: Optional[MediaAnalysis] = None,   # reuse when the caller already analyzed the input
    ) -> ThumbnailResponse: ...
