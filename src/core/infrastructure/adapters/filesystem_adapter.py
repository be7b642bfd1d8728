"""Thin adapter for interacting with the local filesystem."""

import contextlib
import os
from pathlib import Path
import tempfile
from typing import BinaryIO, Protocol

from core.utils.constants import DEFAULT_UPLOAD_ROOT, ENV_UPLOAD_ROOT

CHUNK_SIZE = 64 * 1024


class FilesystemAdapterProtocol(Protocol):
    """Minimal filesystem adapter protocol (storage-facing)."""

    root: Path

    def make_dirs(self, path: Path) -> None: ...

    def write_atomic(self, path: Path, stream: BinaryIO) -> int: ...

    def exists(self, path: Path) -> bool: ...

    def remove(self, path: Path) -> None: ...

    def read_bytes(self, path: Path) -> bytes: ...


class FilesystemAdapter:
    """Low-level filesystem operations (mechanical, no error handling).

    This adapter:
    - Resolves the upload root from the environment
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, root: Path | str | None = None) -> None:
        """Create the adapter for ``root`` or the configured upload root."""
        self.root = Path(root or os.getenv(ENV_UPLOAD_ROOT) or DEFAULT_UPLOAD_ROOT)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_atomic(self, path: Path, stream: BinaryIO) -> int:
        """Drain ``stream`` into ``path`` and return the number of bytes written.

        Content is written to a temporary file next to ``path`` and renamed
        into place, so ``path`` never holds a partially written file.
        Raises OS and stream exceptions - caught by domain implementation.
        """
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".part")
        written = 0

        try:
            with os.fdopen(fd, "wb") as out:
                while chunk := stream.read(CHUNK_SIZE):
                    out.write(chunk)
                    written += len(chunk)
                out.flush()
                os.fsync(out.fileno())

            os.replace(tmp_name, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise

        return written

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def remove(self, path: Path) -> None:
        path.unlink()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()
