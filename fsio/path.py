# path.py
# Path helpers. Nothing here modifies the file system.

import os
from typing import Optional

from fsio.error import IOFailureError, SystemTimeError


def normalize_as_string(path) -> str:
    """Canonical absolute form of an existing ``path``."""
    try:
        return os.path.realpath(os.fspath(path), strict=True)
    except OSError as error:
        raise IOFailureError('Unable to canonicalize path.', error) from error


def canonicalize_or(path, default: str) -> str:
    try:
        return normalize_as_string(path)
    except IOFailureError:
        return default


def base_name(path) -> Optional[str]:
    """Last component of ``path`` (file name or last directory name)."""
    separators = '/' + os.sep
    value = os.fspath(path).rstrip(separators)
    # trailing "." components do not name anything: "foo/." is "foo"
    while value.endswith('.') and value[:-1].endswith(tuple(separators)):
        value = value[:-1].rstrip(separators)
    name = os.path.basename(value)
    if name in ('', '.', '..'):
        return None
    return name


def parent_directory(path) -> Optional[str]:
    """Parent of ``path`` as written, e.g. ``./src/path`` for ``./src/path/mod.rs``."""
    value = os.fspath(path).rstrip('/' + os.sep)
    directory = os.path.dirname(value)
    if not directory or directory == value:
        return None
    return directory


def get_last_modified_time(path) -> int:
    """Last modification time in milliseconds since the Unix epoch."""
    try:
        stat = os.stat(os.fspath(path))
    except OSError as error:
        raise IOFailureError('Unable to extract metadata for path.', error) from error

    if stat.st_mtime_ns < 0:
        error = ValueError(f'modification time {stat.st_mtime_ns}ns is before the Unix epoch')
        raise SystemTimeError('Unable to get last modified duration for path.', error) from error
    return stat.st_mtime_ns // 1_000_000
