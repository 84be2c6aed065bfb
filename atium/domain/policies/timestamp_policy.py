# atium/domain/policies/timestamp_policy.py
from __future__ import annotations

from datetime import datetime, time

from atium.common.logging import get_logger
from atium.domain.entities.analysis import GENERAL_TRACK, MediaAnalysis
from atium.domain.errors import AtiumError, InvalidTimestamp

logger = get_logger(__name__)

DURATION_FIELD = "Duration_String3"
_FORMAT = "%H:%M:%S"


def parse_clock(value: str, what: str = "timestamp") -> time:
    try:
        return datetime.strptime(value, _FORMAT).time()
    except (TypeError, ValueError) as e:
        raise InvalidTimestamp(f"could not parse {what} '{value}' as hh:mm:ss") from e


def validate_timestamp(requested: str, duration: str, *, fallback: str = "00:00:00.000") -> str:
    """
    Effective extraction point for a frame grab.
    `requested` is kept when it falls before `duration`; anything at or past
    the end of the media is moved to `fallback`.
    """
    req = parse_clock(requested, "requested timestamp")
    dur = parse_clock(duration, "duration")
    if req < dur:
        return requested

    logger.warning("Requested timestamp %s is not before duration %s; using %s", requested, duration, fallback)
    return fallback


def source_duration(analysis: MediaAnalysis, *, default: str = "00:00:01") -> str:
    """General-track duration as hh:mm:ss (fraction dropped); `default` when unavailable."""
    try:
        raw = analysis.extract_field(GENERAL_TRACK, DURATION_FIELD)
    except AtiumError as e:
        logger.debug("Duration unavailable (%s); defaulting to %s", e, default)
        return default

    duration = raw.split(".", 1)[0]
    if not duration:
        return default
    logger.debug("Duration in hh:mm:ss format: [%s]", duration)
    return duration
