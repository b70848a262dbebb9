"""Binary save files kept in a folder under the user's home directory."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


class SaveFile:
    """An open save file to which raw elements are written or from which they are read."""

    def __init__(self, handle: BinaryIO, path: Path) -> None:
        self._handle = handle
        self.path = path

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def write_element(self, data: bytes) -> None:
        """Append raw bytes."""
        self._handle.write(data)

    def read_element(self, size: int) -> bytes:
        """Read up to size bytes; fewer come back at the end of the file."""
        return self._handle.read(size)

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        self._handle.close()

    def __enter__(self) -> SaveFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_save(folder: str, name: str, writing: bool, home: str | Path | None = None) -> SaveFile:
    """Open home/folder/name for writing (truncating) or reading.

    The folder is created if it does not exist. Raises OSError if the file
    cannot be opened.
    """
    base = Path(home) if home is not None else Path.home()
    directory = base / folder
    if not directory.exists():
        directory.mkdir(mode=0o755)
    path = directory / name
    handle = open(path, "w+b" if writing else "rb")
    return SaveFile(handle, path)