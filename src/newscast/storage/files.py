"""Output file storage for generated scripts and audio."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog

logger = structlog.get_logger()


class OutputStore:
    """Writes pipeline artifacts below a single output directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / name

    def save_text(self, name: str, text: str) -> Path:
        """Save text content and return the written path."""
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Saved text file: {path}")
        return path

    def save_audio(self, name: str, data: bytes) -> Path:
        """Save binary audio content and return the written path."""
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
        logger.info(f"Saved audio file: {path}", size_bytes=len(data))
        return path

    @staticmethod
    def timestamped_name(prefix: str, extension: str, now: Optional[datetime] = None) -> str:
        """Build ``<prefix>_YYYYMMDD_HHMMSS.<extension>``."""
        timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        return f"{prefix}_{timestamp}.{extension.lstrip('.')}"
