# atium/common/settings.py
from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from atium.domain.enums import InfoFormat, InfoOutputType, OutputResolution


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class ToolsConfig(BaseModel):
    mediainfo_bin: str = "mediainfo"
    mediainfo_probe_args: List[str] = Field(default_factory=lambda: ["--Version"])
    ffmpeg_bin: str = "ffmpeg"
    ffmpeg_probe_args: List[str] = Field(default_factory=lambda: ["-version"])


class DefaultsConfig(BaseModel):
    """Fallback values the composite services apply when a request leaves them out."""
    thumbnail_timestamp: str = "00:00:01"
    source_duration: str = "00:00:01"
    fallback_timestamp: str = "00:00:00.000"
    resolution: OutputResolution = OutputResolution.HD
    analysis_format: InfoFormat = InfoFormat.JSON
    analysis_full: bool = True
    analysis_output_mode: InfoOutputType = InfoOutputType.STDOUT

    @field_validator("analysis_full", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class PathsConfig(BaseModel):
    temp_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))
    temp_suffix: str = ".mp4"
    disambiguator_max: int = Field(10000, ge=1)
    thumbnail_ext: str = "jpeg"
    conversion_ext: str = "mp4"


class Settings(BaseSettings):
    # -------- Logging --------
    log_level: str = "INFO"  # applied by atium.common.logging.get_logger

    # -------- Sub-configs --------
    tools: ToolsConfig = ToolsConfig()
    defaults: DefaultsConfig = DefaultsConfig()
    paths: PathsConfig = PathsConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Services fall back to it when no
    explicit Settings instance is handed to their constructor:
        from atium.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()
