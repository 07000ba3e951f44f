"""Minimal operating-system calls for a board with no file system."""

from __future__ import annotations

import errno
import stat as _stat
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileStatus:
    """Result of a status query: every file looks like a character device."""

    st_mode: int = _stat.S_IFCHR


@dataclass
class SystemCalls:
    """System calls backed by optional character input and output hooks."""

    putchar: Callable[[int], object] | None = None
    getchar: Callable[[], int] | None = None
    environ: dict[str, str] = field(default_factory=dict)

    def getpid(self) -> int:
        """The only process has id 1."""
        return 1

    def kill(self, pid: int, sig: int) -> None:
        """Signals are not supported."""
        raise OSError(errno.EINVAL, "signals are not supported")

    def exit(self, status: int) -> None:
        """Stop the program with ``status``."""
        try:
            self.kill(status, -1)
        except OSError:
            pass
        raise SystemExit(status)

    def read(self, file: int, length: int) -> bytes:
        """Read ``length`` characters from the input hook."""
        if length > 0 and self.getchar is None:
            raise OSError(errno.ENOSYS, "no character input available")
        return bytes(self.getchar() & 0xFF for _ in range(length))

    def write(self, file: int, data: bytes) -> int:
        """Send every byte to the output hook and return how many were sent."""
        if data and self.putchar is None:
            raise OSError(errno.ENOSYS, "no character output available")
        for byte in data:
            self.putchar(byte)
        return len(data)

    def close(self, file: int) -> None:
        """Files cannot be closed."""
        raise OSError(f"cannot close file {file}")

    def fstat(self, file: int) -> FileStatus:
        """Every open file is a character device."""
        return FileStatus()

    def isatty(self, file: int) -> bool:
        """A file is a terminal when it is a character device, which all are."""
        return _stat.S_ISCHR(self.fstat(file).st_mode)

    def lseek(self, file: int, ptr: int, direction: int) -> int:
        """Character devices cannot seek, so the offset is always 0."""
        if _stat.S_ISCHR(self.fstat(file).st_mode):
            return 0
        return ptr

    def open(self, path: str, flags: int) -> int:
        """Opening files always fails."""
        raise OSError(f"cannot open {path!r}")

    def wait(self) -> int:
        """There are no child processes."""
        raise OSError(errno.ECHILD, "no child processes")

    def unlink(self, name: str) -> None:
        """No file exists to remove."""
        raise OSError(errno.ENOENT, "no such file", name)

    def times(self) -> object:
        """The board keeps no process clock, so the query fails."""
        raise OSError(errno.ENOSYS, "the board keeps no process clock")

    def stat(self, path: str) -> FileStatus:
        """Every path is a character device."""
        return FileStatus()

    def link(self, old: str, new: str) -> None:
        """Links cannot be made."""
        raise OSError(errno.EMLINK, "too many links", old)

    def fork(self) -> int:
        """New processes cannot be made."""
        raise OSError(errno.EAGAIN, "cannot create a process")

    def execve(self, name: str, argv: list[str], env: dict[str, str]) -> None:
        """Programs cannot be started."""
        raise OSError(errno.ENOMEM, "cannot start a program", name)