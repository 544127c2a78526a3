"""In-memory file server with per-file owners and permission bits.

Files are identified by inode numbers from 0 to ``MAX_FILES - 1``.  Inode 0
is reserved and allocated from the start; new files take the lowest free
inode from 1 upwards.  The caller of every operation is named by its user
id.  User id 0 (root) may do anything.  Any other caller is checked against
the owner bits if it owns the file, and against the other bits if not.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, replace
from typing import List, Union

MAX_FILES = 100
BUF_SIZE = 1024
ROOT_UID = 0

BytesLike = Union[bytes, bytearray, memoryview]
PathLike = Union[str, "os.PathLike[str]"]


class FileError(Exception):
    """Raised when a file request is refused."""


class Permission(enum.IntFlag):
    """Permission bits of a file."""

    OTHER_READ = 0x1
    OTHER_WRITE = 0x2
    OWNER_READ = 0x4
    OWNER_WRITE = 0x8
    DEFAULT = OWNER_READ | OWNER_WRITE | OTHER_READ
    ALL = OWNER_READ | OWNER_WRITE | OTHER_READ | OTHER_WRITE


@dataclass
class FileStat:
    """Status of a file: whether it exists, its size, owner and mode."""

    alloc: bool = False
    size: int = 0
    uid: int = 0
    mode: Permission = Permission(0)


@dataclass
class _File:
    stat: FileStat
    contents: bytearray


class RamFileServer:
    """A file server keeping every file as one contiguous block of memory."""

    def __init__(self) -> None:
        self._files: List[_File] = [
            _File(FileStat(), bytearray()) for _ in range(MAX_FILES)
        ]
        self._files[0].stat.alloc = True

    # -- helpers ---------------------------------------------------------

    def _file(self, ino: int) -> _File:
        if not 0 <= ino < MAX_FILES or not self._files[ino].stat.alloc:
            raise FileError(f"bad inode {ino}")
        return self._files[ino]

    @staticmethod
    def _allowed(file: _File, uid: int, owner_bit: Permission, other_bit: Permission) -> bool:
        if uid == ROOT_UID:
            return True
        if uid == file.stat.uid:
            return bool(file.stat.mode & owner_bit)
        return bool(file.stat.mode & other_bit)

    def _readable(self, uid: int, ino: int) -> _File:
        file = self._file(ino)
        if not self._allowed(file, uid, Permission.OWNER_READ, Permission.OTHER_READ):
            raise FileError(f"permission denied: {ino}")
        return file

    def _writable(self, uid: int, ino: int) -> _File:
        file = self._file(ino)
        if not self._allowed(file, uid, Permission.OWNER_WRITE, Permission.OTHER_WRITE):
            raise FileError(f"permission denied: {ino}")
        return file

    @staticmethod
    def _non_negative(name: str, value: int) -> None:
        if value < 0:
            raise FileError(f"negative {name} {value}")

    # -- requests --------------------------------------------------------

    def create(self, uid: int, mode: int = Permission.DEFAULT) -> int:
        """Allocate a new empty file owned by ``uid`` and return its inode."""
        ino = next(
            (i for i in range(1, MAX_FILES) if not self._files[i].stat.alloc), None
        )
        if ino is None:
            raise FileError("out of files")
        self._files[ino] = _File(
            FileStat(alloc=True, size=0, uid=uid, mode=Permission(mode)), bytearray()
        )
        return ino

    def read(self, uid: int, ino: int, offset: int, size: int) -> bytes:
        """Return up to ``size`` bytes of the file starting at ``offset``."""
        file = self._readable(uid, ino)
        self._non_negative("offset", offset)
        self._non_negative("size", size)
        if offset >= file.stat.size:
            return b""
        return bytes(file.contents[offset:offset + size])

    def write(self, uid: int, ino: int, offset: int, data: BytesLike) -> None:
        """Store ``data`` at ``offset``, growing the file (with zeros) if needed."""
        file = self._writable(uid, ino)
        self._non_negative("offset", offset)
        payload = bytes(data)
        end = offset + len(payload)
        if end > file.stat.size:
            file.contents.extend(bytes(end - len(file.contents)))
            file.stat.size = end
        file.contents[offset:end] = payload

    def stat(self, uid: int, ino: int) -> FileStat:
        """Return a copy of the file's status."""
        return replace(self._readable(uid, ino).stat)

    def setsize(self, uid: int, ino: int, size: int) -> None:
        """Shrink the file to ``size`` bytes; it cannot be grown this way."""
        file = self._file(ino)
        self._non_negative("size", size)
        if size > file.stat.size:
            raise FileError(f"bad size {size} for inode {ino}")
        file = self._writable(uid, ino)
        file.stat.size = size
        del file.contents[size:]

    def chown(self, uid: int, ino: int, new_uid: int) -> None:
        """Give the file to ``new_uid``; only root may do this."""
        file = self._file(ino)
        if uid != ROOT_UID:
            raise FileError(f"permission denied for uid {uid}")
        file.stat.uid = new_uid

    def chmod(self, uid: int, ino: int, mode: int) -> None:
        """Set the file's permission bits; only root or the owner may do this."""
        file = self._file(ino)
        if uid != ROOT_UID and uid != file.stat.uid:
            raise FileError(f"permission denied for uid {uid}")
        file.stat.mode = Permission(mode)

    def load(self, ino: int, path: PathLike) -> None:
        """Fill file ``ino`` with the contents of the local file at ``path``."""
        self._file(ino)
        offset = 0
        with open(path, "rb") as source:
            for chunk in iter(lambda: source.read(BUF_SIZE), b""):
                self.write(ROOT_UID, ino, offset, chunk)
                offset += len(chunk)