# atium/services/schemas/conversion.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from atium.domain.enums import InputSourceType, OutputCodec, OutputResolution
from atium.services.schemas.thumbs import ThumbnailRequest, ThumbnailResponse


class ConversionRequest(BaseModel):
    input_file: str = Field(..., min_length=1)
    output_file: str = Field(..., min_length=1)
    resolution: Optional[OutputResolution] = None  # None -> settings.defaults.resolution
    source_type: InputSourceType = InputSourceType.LOCAL
    codec: OutputCodec = OutputCodec.H264
    # input_file may be left empty: the converted output is used then
    thumbnail_request: Optional[ThumbnailRequest] = None


class ConversionResponse(BaseModel):
    output_file: str
    thumbnail_response: Optional[ThumbnailResponse] = None
