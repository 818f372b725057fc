# hmac.py
# HMAC (RFC 2104) over any Digest backend.

import hmac as _stdlib_hmac

from Crypto.Util.strxor import strxor_c

from hashcore.backends import resolve
from hashcore.buffers import byte_view

INNER_PAD = 0x36
OUTER_PAD = 0x5C


class HmacKey:
    """Pre-computed HMAC key for one digest algorithm.

    The secret is reduced to one block of key material at construction and
    stored XOR-ed with the inner pad, so ``sign`` never re-derives it.
    Secrets longer than the block size are hashed first.

    ``digest`` is a Digest subclass or a registered algorithm name.
    """

    __slots__ = ('_digest', '_key')

    def __init__(self, secret, digest):
        digest = resolve(digest)
        secret = byte_view(secret)
        key = bytearray(digest.block_size)

        if len(secret) <= len(key):
            key[:len(secret)] = secret
        else:
            algo = digest.new()
            algo.update(secret)
            hashed = algo.result()
            key[:len(hashed)] = hashed
            algo.reset()

        strxor_c(key, INNER_PAD, output=key)
        self._digest = digest
        self._key = bytes(key)

    @property
    def digest(self):
        return self._digest

    @property
    def material(self) -> bytes:
        """Stored key block (secret XOR 0x36), always ``block_size`` bytes."""
        return self._key

    def sign(self, data) -> bytes:
        key = bytearray(self._key)

        algo = self._digest.new()
        algo.update(key)
        algo.update(data)
        inner = algo.result()

        # ipad -> opad without going back to the raw secret
        strxor_c(key, INNER_PAD ^ OUTER_PAD, output=key)
        algo = self._digest.new()
        algo.update(key)
        algo.update(inner)
        return algo.result()

    def verify(self, data, tag) -> bool:
        return _stdlib_hmac.compare_digest(self.sign(data), bytes(tag))

    def __repr__(self):
        return f'<HmacKey {self._digest.__name__}>'


def hmac(data, secret, digest) -> bytes:
    """Sign ``data`` with a key derived from ``secret`` in one call.

    - ``data`` - bytes to authenticate.
    - ``secret`` - bytes to derive the HMAC key from.
    - ``digest`` - Digest subclass or algorithm name.
    """
    return HmacKey(secret, digest).sign(data)
