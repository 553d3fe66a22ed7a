"""Upward search for a definition file, starting from a given directory."""
from __future__ import annotations

import os
import stat
from pathlib import Path

from dotenv_build.application.exceptions import IoError, NotFoundError
from dotenv_build.domain.entities.search_request import SearchRequest

_ABSENT = (FileNotFoundError, NotADirectoryError)


def locate(request: SearchRequest) -> Path:
    """Return the first regular file named ``request.filename``.

    The start directory is probed first, then each ancestor up to the
    filesystem root when ``request.recursive`` is set. A non-regular entry
    with the right name is skipped. Any metadata error other than the path
    being absent stops the search with ``IoError``.
    """
    directory = request.start_directory.absolute()
    while True:
        candidate = directory / request.filename
        if _is_regular_file(candidate):
            return candidate

        parent = directory.parent
        if not request.recursive or parent == directory:
            break
        directory = parent

    scope = "or any parent directory" if request.recursive else "only"
    raise NotFoundError(
        f"{str(request.filename)!r} not found in {str(request.start_directory.absolute())!r} {scope}"
    )


def _is_regular_file(candidate: Path) -> bool:
    try:
        st = os.stat(candidate)
    except _ABSENT:
        return False
    except OSError as exc:
        raise IoError.from_os_error(exc) from exc
    return stat.S_ISREG(st.st_mode)
