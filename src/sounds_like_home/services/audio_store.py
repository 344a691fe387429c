"""Local filesystem storage for submitted audio clips."""

from __future__ import annotations

import logging
from pathlib import Path

from sounds_like_home.core.settings import settings

logger = logging.getLogger(__name__)


class AudioStore:
    """Stores audio objects as files under a single root directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path_for(self, filename: str) -> Path:
        """Return the absolute path of ``filename`` inside the store.

        Raises:
            ValueError: If the name would resolve outside the storage root.
        """
        root = self.root.resolve()
        path = (root / filename).resolve()
        if path.parent != root:
            raise ValueError(f"Invalid audio object name: {filename!r}")
        return path

    def save(self, filename: str, data: bytes) -> Path:
        """Write ``data`` under ``filename`` and return the stored path."""
        path = self.path_for(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Stored %d bytes of audio at %s", len(data), path)
        return path

    def exists(self, filename: str) -> bool:
        return self.path_for(filename).is_file()

    def delete(self, filename: str) -> bool:
        """Remove a stored object. Returns False if it was already gone."""
        path = self.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True


def get_audio_store() -> AudioStore:
    """Return the audio store configured for this deployment."""
    return AudioStore(settings.audio_storage_dir)
