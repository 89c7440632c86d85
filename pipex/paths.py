"""Finding the file a command name refers to."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pipex.libft.search import strchr, strlen, strnstr
from pipex.libft.transform import split

DEFAULT_PATH = "/usr/bin:/bin"


def search_dirs(env: Optional[Mapping[str, str]] = None) -> list[str]:
    """The directories to search, taken from ``PATH`` in ``env``.

    An empty environment falls back to the default search path; one with
    no ``PATH``, or an empty one, gives no directories. ``env`` defaults to
    the process environment.
    """
    if env is None:
        env = os.environ
    if not env:
        return split(DEFAULT_PATH, ":") or []
    value = env.get("PATH")
    if not value:
        return []
    return split(value, ":") or []


def locate(command: str, directory: str) -> Optional[str]:
    """The path of ``command`` looked up in ``directory``, if it exists.

    A command starting with ``/`` or ``./``, or a script path holding a
    slash, is taken as it is instead of being joined to the directory.
    """
    if command.startswith("/") or command.startswith("./"):
        candidate = command
    elif strnstr(command, ".sh", strlen(command)) is not None and strchr(command, "/") is not None:
        candidate = command
    else:
        candidate = f"{directory}/{command}"
    if os.access(candidate, os.F_OK):
        return candidate
    return None


def get_path(command: Optional[str], env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """The file to run for ``command``, or None when it cannot be found.

    A command starting with ``.`` or ``/`` is returned unchanged.
    """
    if command is None:
        return None
    if command[:1] in (".", "/"):
        return command
    for directory in search_dirs(env):
        found = locate(command, directory)
        if found is not None:
            return found
    return None