import logging
import os
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)

class LocalStorage:
    """Owns the local directories used for transient upload staging and
    rendered output. Both directories are created on demand.
    """
    def __init__(self, staging_dir: Path, output_dir: Path):
        self.staging_dir = Path(staging_dir)
        self.output_dir = Path(output_dir)

    def stage(self, file_name: str, data: bytes) -> Path:
        """Writes an uploaded payload to a unique file in the staging directory."""
        self.staging_dir.mkdir(parents=True, exist_ok=True)
        safe_name = os.path.basename(file_name or "") or "upload"
        path = self.staging_dir / f"{uuid.uuid4().hex}_{safe_name}"
        path.write_bytes(data)
        return path

    def discard(self, path: Path) -> None:
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Error deleting temp file {path}: {e}")

    def write_output(self, text: str, suffix: str = ".html") -> Path:
        """Writes a rendered document to a unique file in the output directory.

        Each call writes its own file.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"{uuid.uuid4().hex}{suffix}"
        path.write_text(text, encoding="utf-8")
        return path
