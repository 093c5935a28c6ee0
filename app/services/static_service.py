"""Lookup and loading of the bundled front-end files."""
from pathlib import Path
from typing import Optional, Tuple

from fastapi.concurrency import run_in_threadpool

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
}


def content_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix, DEFAULT_CONTENT_TYPE)


class StaticFileService:
    """Serve regular files below a fixed root, "/" mapping to the index document."""

    def __init__(self, root: Path, index: str = "index.html") -> None:
        self.root = Path(root).resolve()
        self.index = index

    def resolve(self, url_path: str) -> Optional[Path]:
        """Map a URL path to a file under root, or None if there is none."""
        relative = url_path.lstrip("/") or self.index
        try:
            candidate = (self.root / relative).resolve()
        except (OSError, ValueError):
            return None

        # Paths escaping the root through ".." are treated as missing
        if candidate != self.root and self.root not in candidate.parents:
            return None
        try:
            if not candidate.is_file():
                return None
        except OSError:
            # e.g. ENAMETOOLONG
            return None
        return candidate

    async def load(self, path: Path) -> Tuple[bytes, str]:
        """Read a resolved file; OSError propagates to the caller."""
        content = await run_in_threadpool(path.read_bytes)
        return content, content_type_for(path)
