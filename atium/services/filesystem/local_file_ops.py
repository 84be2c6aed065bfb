from __future__ import annotations

import shutil
from pathlib import Path

from atium.common.logging import get_logger
from atium.common.naming.tokens import unique_token
from atium.domain.errors import OutputError
from atium.domain.ports.files import FileOpsPort

logger = get_logger(__name__)


class LocalFileOps(FileOpsPort):
    """
    Local filesystem implementation for FileOpsPort.
    """

    def copy_to_temp(self, src: Path, *, temp_dir: Path, suffix: str) -> Path:
        """Copy `src` to `<temp_dir>/<uuid4><suffix>`. No cleanup needed on failure."""
        src_p = Path(src)
        if not src_p.is_file():
            raise FileNotFoundError(f"Source file not found: {src_p}")

        dst_p = Path(temp_dir) / f"{unique_token()}{suffix}"
        shutil.copyfile(src_p, dst_p)
        logger.debug("Copied %s to %s", src_p, dst_p)
        return dst_p

    def remove_file(self, path: Path) -> bool:
        """Best-effort delete; failures are logged, never raised."""
        try:
            Path(path).unlink()
        except OSError as e:
            logger.warning("Temporary file not removed: %s", e)
            return False
        logger.debug("Temporary file removed successfully")
        return True

    def write_bytes(self, path: Path, data: bytes) -> Path:
        p = Path(path)
        try:
            p.write_bytes(data)
        except OSError as e:
            logger.error("Could not write to file %s: %s", p, e)
            raise OutputError(f"could not write to file {p}") from e
        return p
