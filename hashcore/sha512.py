# sha512.py
# SHA-512 backend (FIPS 180-4): 128-byte blocks, 64-byte digest, 128-bit
# length field.

import struct

from hashcore.constants import cbrt_words, sqrt_words
from hashcore.digest import BlockDigest

_MASK = 0xFFFFFFFFFFFFFFFF
_K = cbrt_words(80, 64)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & _MASK


class Sha512(BlockDigest):
    name = 'sha512'
    block_size = 128
    digest_size = 64
    length_size = 16
    _initial_state = sqrt_words(8, 64)

    def _compress(self, block) -> None:
        w = list(struct.unpack('>16Q', block))
        for t in range(16, 80):
            s0 = _rotr(w[t - 15], 1) ^ _rotr(w[t - 15], 8) ^ (w[t - 15] >> 7)
            s1 = _rotr(w[t - 2], 19) ^ _rotr(w[t - 2], 61) ^ (w[t - 2] >> 6)
            w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK)

        a, b, c, d, e, f, g, h = self._state
        for t in range(80):
            s1 = _rotr(e, 14) ^ _rotr(e, 18) ^ _rotr(e, 41)
            ch = (e & f) ^ (~e & g)
            t1 = (h + s1 + ch + _K[t] + w[t]) & _MASK
            s0 = _rotr(a, 28) ^ _rotr(a, 34) ^ _rotr(a, 39)
            maj = (a & b) ^ (a & c) ^ (b & c)
            t2 = (s0 + maj) & _MASK
            h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK

        self._state = [(s + v) & _MASK for s, v in zip(self._state, (a, b, c, d, e, f, g, h))]

    def _output(self) -> bytes:
        return struct.pack('>8Q', *self._state)


def sha512(data=b'') -> bytes:
    """One-shot SHA-512 of ``data``."""
    h = Sha512()
    h.update(data)
    return h.result()
