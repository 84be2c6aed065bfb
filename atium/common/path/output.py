# atium/common/path/output.py
from __future__ import annotations

from pathlib import Path

from atium.common.logging import get_logger
from atium.common.naming.tokens import random_disambiguator, unique_token

logger = get_logger(__name__)

_MAX_DRAWS = 8


def split_stem_and_extension(path: Path | str, fallback_extension: str) -> tuple[str, str]:
    """
    Split a file path into (stem, extension).
      - no extension -> fallback_extension
      - no file component -> a uuid4 stem
    """
    p = Path(path)
    stem = p.stem
    if not p.name or stem in ("", ".", ".."):
        stem = unique_token()
    ext = p.suffix[1:] if p.suffix else fallback_extension.lstrip(".")
    return stem, ext


def resolve_output_path(
    desired: Path | str,
    fallback_extension: str,
    *,
    disambiguator_max: int = 10000,
) -> str:
    """
    Never overwrite: return `desired` untouched when nothing lives there,
    otherwise `<dir>/<stem>-<n>.<ext>` with a random decimal `n`.

    Only checks existence; the file itself is never created here.
    """
    desired = str(desired)
    if not Path(desired).exists():
        return desired

    stem, ext = split_stem_and_extension(desired, fallback_extension)
    parent = Path(desired).parent
    candidate = desired
    for _ in range(_MAX_DRAWS):
        candidate = str(parent / f"{stem}-{random_disambiguator(disambiguator_max)}.{ext}")
        if not Path(candidate).exists():
            break
    else:
        candidate = str(parent / f"{stem}-{unique_token()}.{ext}")
    logger.debug("Output path %s exists; using %s", desired, candidate)
    return candidate
