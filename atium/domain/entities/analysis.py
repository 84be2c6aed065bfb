# atium/domain/entities/analysis.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, JsonValue, ValidationError

from atium.common.logging import get_logger
from atium.domain.errors import FieldNotFound, MalformedAnalysis, TrackNotFound

logger = get_logger(__name__)

# Field values are kept exactly as the analysis tool emitted them
# (str | int | float | bool | None | list | dict); coercion happens on read.
TrackRecord = Dict[str, JsonValue]

GENERAL_TRACK = 0


class MediaSection(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    track: List[TrackRecord]


class MediaAnalysis(BaseModel):
    """
    Structured analysis output: `{"media": {"track": [ {...}, ... ]}}`.
    Track 0 is the "general" track, 1.. are per-stream tracks, in the
    order the tool returned them.
    """
    model_config = ConfigDict(strict=True, frozen=True)

    media: MediaSection

    @property
    def tracks(self) -> List[TrackRecord]:
        return self.media.track

    def extract_field(self, track_index: int, field_name: str) -> str:
        """
        Look up `field_name` (case-sensitive) in track `track_index`.
        Non-string values read as "".
        """
        if not 0 <= track_index < len(self.tracks):
            raise TrackNotFound(f"no track #{track_index} (have {len(self.tracks)})")
        track = self.tracks[track_index]
        if field_name not in track:
            raise FieldNotFound(f"track #{track_index} has no field '{field_name}'")

        value = track[field_name]
        if isinstance(value, str):
            logger.debug("Extracted field value: [%s]", value)
            return value
        return ""


def parse_analysis(data: bytes | str) -> MediaAnalysis:
    """Strictly deserialize analysis JSON. No partial results."""
    try:
        return MediaAnalysis.model_validate_json(data)
    except ValidationError as e:
        logger.error("Error when parsing analysis JSON: %s", e)
        raise MalformedAnalysis("could not parse analysis JSON") from e


def load_analysis_file(path: Path | str) -> MediaAnalysis:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error("Error when reading analysis file %s: %s", path, e)
        raise MalformedAnalysis(f"could not read analysis file: {path}") from e
    return parse_analysis(data)
