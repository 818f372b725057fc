# directory.py
# Directory creation and removal.

import logging
import os
import shutil

from fsio.error import IOFailureError, NotFileError
from fsio.path import parent_directory

logger = logging.getLogger(__name__)


def create(path) -> None:
    """Create ``path`` and any missing parents. Existing directories are kept."""
    directory = os.fspath(path)
    if os.path.isdir(directory):
        return
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as error:
        raise IOFailureError(f'Unable to create directory: {directory!r}.', error) from error
    logger.debug('Created directory %s', directory)


def create_parent(path) -> None:
    """Create the parent directory of ``path``, if it has one."""
    directory = parent_directory(path)
    if directory is not None:
        create(directory)


def delete(path) -> None:
    """Delete the directory and everything under it. Missing paths are ignored."""
    directory = os.fspath(path)
    if not os.path.lexists(directory):
        return
    if not os.path.isdir(directory) or os.path.islink(directory):
        raise NotFileError(f'Path: {directory!r} is not a directory.')
    try:
        shutil.rmtree(directory)
    except OSError as error:
        raise IOFailureError(f'Unable to delete directory: {directory!r}', error) from error
    logger.debug('Deleted directory %s', directory)
