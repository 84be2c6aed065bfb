# atium/domain/enums/resolution.py
from __future__ import annotations

from enum import StrEnum


class OutputResolution(StrEnum):
    """
    Symbolic output resolutions:
      SD            -> 480p  - 640x480
      HD            -> 720p  - 1280x720
      FULL_HD       -> 1080p - 1920x1080
      FULL_HD_2K    -> 1080p - 2048x1080
      ULTRA_HD      -> 4k    - 3840x2160
      FULL_ULTRA_HD -> 8k    - 7680x4320
    """
    SD = "sd"
    HD = "hd"
    FULL_HD = "full_hd"
    FULL_HD_2K = "full_hd_2k"
    ULTRA_HD = "ultra_hd"
    FULL_ULTRA_HD = "full_ultra_hd"


class OutputCodec(StrEnum):
    H264 = "h264"
    VP9 = "vp9"
