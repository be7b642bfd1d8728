import io
from unittest.mock import patch

import pytest

from core.infrastructure.adapters.filesystem_adapter import FilesystemAdapter


class FailingStream(io.RawIOBase):
    """Yields one chunk and then fails, like an aborted upload."""

    def __init__(self) -> None:
        self._sent = False

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if not self._sent:
            self._sent = True
            return b"partial"
        raise ConnectionResetError("client went away")


class TestFilesystemAdapter:
    def test_root_defaults_to_environment(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("UPLOAD_ROOT", str(tmp_path / "from-env"))

        assert FilesystemAdapter().root == tmp_path / "from-env"

    def test_explicit_root_wins(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("UPLOAD_ROOT", str(tmp_path / "from-env"))

        assert FilesystemAdapter(tmp_path / "explicit").root == tmp_path / "explicit"

    def test_write_atomic_writes_content(self, tmp_path) -> None:
        adapter = FilesystemAdapter(tmp_path)
        target = tmp_path / "file.bin"

        written = adapter.write_atomic(target, io.BytesIO(b"hello world"))

        assert written == 11
        assert target.read_bytes() == b"hello world"
        assert [p.name for p in tmp_path.iterdir()] == ["file.bin"]

    def test_write_atomic_leaves_nothing_on_stream_failure(self, tmp_path) -> None:
        adapter = FilesystemAdapter(tmp_path)
        target = tmp_path / "file.bin"

        with pytest.raises(ConnectionResetError):
            adapter.write_atomic(target, FailingStream())

        assert list(tmp_path.iterdir()) == []

    def test_write_atomic_leaves_nothing_when_rename_fails(self, tmp_path) -> None:
        adapter = FilesystemAdapter(tmp_path)

        with patch("core.infrastructure.adapters.filesystem_adapter.os.replace", side_effect=OSError("disk")):
            with pytest.raises(OSError):
                adapter.write_atomic(tmp_path / "file.bin", io.BytesIO(b"data"))

        assert list(tmp_path.iterdir()) == []

    def test_exists_and_remove(self, tmp_path) -> None:
        adapter = FilesystemAdapter(tmp_path)
        target = tmp_path / "x.png"
        target.write_bytes(b"x")

        assert adapter.exists(target) is True
        adapter.remove(target)
        assert adapter.exists(target) is False

    def test_exists_is_false_for_directories(self, tmp_path) -> None:
        assert FilesystemAdapter(tmp_path).exists(tmp_path) is False
