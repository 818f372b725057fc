# file.py
# File helpers: create, write/append, read and delete. Parent directories are
# created on demand.

import logging
import os
from typing import Callable

from fsio import directory
from fsio.error import AlreadyExistsError, FsIOError, IOFailureError, NotFileError

logger = logging.getLogger(__name__)


def ensure_exists(path) -> None:
    """Create an empty file at ``path`` unless a file is already there."""
    file_path = os.fspath(path)
    if os.path.exists(file_path):
        if os.path.isfile(file_path):
            return
        raise AlreadyExistsError(f'Unable to create file: {file_path!r}')

    directory.create_parent(file_path)
    try:
        with open(file_path, 'wb'):
            pass
    except OSError as error:
        raise IOFailureError(f'Unable to create file: {file_path!r}', error) from error
    logger.debug('Created file %s', file_path)


def modify_file(path, write_content: Callable, append: bool = False) -> None:
    """Overwrite (or append to) ``path`` through ``write_content(fileobj)``.

    The file is opened in binary mode and synced to disk before returning.
    """
    directory.create_parent(path)
    file_path = os.fspath(path)

    mode = 'ab' if append and os.path.exists(file_path) else 'wb'
    try:
        handle = open(file_path, mode)
    except OSError as error:
        raise IOFailureError(f'Unable to create/open file: {file_path!r} for writing.', error) from error

    with handle:
        try:
            write_content(handle)
        except OSError as error:
            raise IOFailureError(f'Error while writing to file: {file_path!r}', error) from error
        try:
            handle.flush()
            os.fsync(handle.fileno())
        except OSError as error:
            raise IOFailureError(f'Error finish up writing to file: {file_path!r}', error) from error


def write_file(path, data: bytes) -> None:
    modify_file(path, lambda handle: handle.write(data), append=False)


def append_file(path, data: bytes) -> None:
    modify_file(path, lambda handle: handle.write(data), append=True)


def write_text_file(path, text: str) -> None:
    write_file(path, text.encode('utf-8'))


def append_text_file(path, text: str) -> None:
    append_file(path, text.encode('utf-8'))


def read_file(path) -> bytes:
    file_path = os.fspath(path)
    try:
        with open(file_path, 'rb') as f:
            return f.read()
    except OSError as error:
        raise IOFailureError(f'Unable to read file: {file_path!r}', error) from error


def read_text_file(path) -> str:
    file_path = os.fspath(path)
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as error:
        raise IOFailureError(f'Unable to read file: {file_path!r}', error) from error


def delete(path) -> None:
    """Delete the file at ``path``. Missing files are ignored."""
    file_path = os.fspath(path)
    if not os.path.lexists(file_path):
        return
    if not (os.path.isfile(file_path) or os.path.islink(file_path)):
        raise NotFileError(f'Path: {file_path!r} is not a file.')
    try:
        os.remove(file_path)
    except OSError as error:
        raise IOFailureError(f'Unable to delete file: {file_path!r}', error) from error
    logger.debug('Deleted file %s', file_path)


def delete_ignore_error(path) -> bool:
    try:
        delete(path)
    except FsIOError as error:
        logger.warning('Ignoring failed delete of %s: %s', os.fspath(path), error.message)
        return False
    return True
