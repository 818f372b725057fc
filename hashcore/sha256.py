# sha256.py
# SHA-256 backend (FIPS 180-4): 64-byte blocks, 32-byte digest.

import struct

from hashcore.constants import cbrt_words, sqrt_words
from hashcore.digest import BlockDigest

_MASK = 0xFFFFFFFF
_K = cbrt_words(64, 32)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


class Sha256(BlockDigest):
    name = 'sha256'
    block_size = 64
    digest_size = 32
    _initial_state = sqrt_words(8, 32)

    def _compress(self, block) -> None:
        w = list(struct.unpack('>16I', block))
        for t in range(16, 64):
            s0 = _rotr(w[t - 15], 7) ^ _rotr(w[t - 15], 18) ^ (w[t - 15] >> 3)
            s1 = _rotr(w[t - 2], 17) ^ _rotr(w[t - 2], 19) ^ (w[t - 2] >> 10)
            w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK)

        a, b, c, d, e, f, g, h = self._state
        for t in range(64):
            s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
            ch = (e & f) ^ (~e & g)
            t1 = (h + s1 + ch + _K[t] + w[t]) & _MASK
            s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
            maj = (a & b) ^ (a & c) ^ (b & c)
            t2 = (s0 + maj) & _MASK
            h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK

        self._state = [(s + v) & _MASK for s, v in zip(self._state, (a, b, c, d, e, f, g, h))]

    def _output(self) -> bytes:
        return struct.pack('>8I', *self._state)


def sha256(data=b'') -> bytes:
    """One-shot SHA-256 of ``data``."""
    h = Sha256()
    h.update(data)
    return h.result()
