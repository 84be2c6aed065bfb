# atium/services/schemas/thumbs.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ThumbnailRequest(BaseModel):
    timestamp: Optional[str] = Field(None, examples=["00:00:05"])  # hh:mm:ss
    input_file: Optional[str] = None
    output_file: Optional[str] = None

    @classmethod
    def create(
        cls,
        timestamp: Optional[str] = None,
        input_file: Optional[str] = None,
        output_file: Optional[str] = None,
    ) -> Optional["ThumbnailRequest"]:
        """None when neither an input nor an output was given (nothing to extract)."""
        if input_file is None and output_file is None:
            return None
        return cls(timestamp=timestamp, input_file=input_file, output_file=output_file)


class ThumbnailResponse(BaseModel):
    output_path: str
