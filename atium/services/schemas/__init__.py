from atium.services.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    parse_info_format,
    parse_output_mode,
)
from atium.services.schemas.thumbs import (
    ThumbnailRequest,
    ThumbnailResponse,
)
from atium.services.schemas.conversion import (
    ConversionRequest,
    ConversionResponse,
)
__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "parse_info_format",
    "parse_output_mode",
    "ThumbnailRequest",
    "ThumbnailResponse",
    "ConversionRequest",
    "ConversionResponse",
]
