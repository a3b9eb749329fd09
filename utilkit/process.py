"""Information about the running process."""

from __future__ import annotations

import ntpath
import os
import sys


def get_pid() -> int:
    """Return the id of the current process."""
    return os.getpid()


def _posix_basename(path: str) -> str:
    """Return the last path component, ignoring trailing slashes."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def get_executable_name() -> str:
    """Return the name the running program was started as, without its directory.

    On Windows the file extension is dropped as well. Raises OSError when
    no name is available.
    """
    name = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    if not name:
        raise OSError("unable to determine the executable name")
    if os.name == "nt":
        return ntpath.splitext(ntpath.basename(name))[0]
    return _posix_basename(name)