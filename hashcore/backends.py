# backends.py
# Registry of the available Digest backends, selectable by name.
#
# Backends are imported on first use, so a trimmed build only needs the
# modules listed in HASHCORE_ALGORITHMS.

import importlib
import logging
import os

from hashcore.digest import Digest

logger = logging.getLogger(__name__)

ALGORITHMS = {
    'md5': 'hashcore.md5:Md5',
    'sha1': 'hashcore.sha1:Sha1',
    'sha256': 'hashcore.sha256:Sha256',
    'sha512': 'hashcore.sha512:Sha512',
}

_loaded = {}


class UnsupportedAlgorithmError(ValueError):
    pass


def normalize_name(name: str) -> str:
    return name.strip().lower().replace('-', '').replace('_', '')


def enabled_algorithms() -> tuple:
    """Names of the enabled backends, honouring HASHCORE_ALGORITHMS."""
    raw = os.getenv('HASHCORE_ALGORITHMS', '')
    if not raw.strip():
        return tuple(ALGORITHMS)
    names = []
    for item in raw.split(','):
        if not item.strip():
            continue
        name = normalize_name(item)
        if name not in ALGORITHMS:
            raise UnsupportedAlgorithmError(f'HASHCORE_ALGORITHMS lists unknown algorithm {item.strip()!r}')
        if name not in names:
            names.append(name)
    logger.debug('Enabled hash algorithms: %s', ', '.join(names))
    return tuple(names)


def get_digest(name: str):
    """Return the Digest subclass registered under ``name``."""
    key = normalize_name(name)
    if key not in ALGORITHMS:
        raise UnsupportedAlgorithmError(f'Unknown hash algorithm: {name!r}')
    if key not in enabled_algorithms():
        raise UnsupportedAlgorithmError(f'Hash algorithm {name!r} is disabled by HASHCORE_ALGORITHMS')
    cls = _loaded.get(key)
    if cls is None:
        module_name, class_name = ALGORITHMS[key].split(':')
        cls = getattr(importlib.import_module(module_name), class_name)
        _loaded[key] = cls
        logger.debug('Loaded hash backend %s from %s', class_name, module_name)
    return cls


def new(name: str, data=b'') -> Digest:
    h = get_digest(name).new()
    h.update(data)
    return h


def resolve(digest):
    """Accept a Digest subclass or an algorithm name and return the class."""
    if isinstance(digest, type) and issubclass(digest, Digest):
        return digest
    if isinstance(digest, str):
        return get_digest(digest)
    raise TypeError(f'Expected a Digest subclass or algorithm name, got {digest!r}')
