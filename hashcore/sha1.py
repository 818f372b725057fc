# sha1.py
# SHA-1 backend (FIPS 180-4): 64-byte blocks, 20-byte digest.

import struct

from hashcore.digest import BlockDigest

_MASK = 0xFFFFFFFF


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


class Sha1(BlockDigest):
    name = 'sha1'
    block_size = 64
    digest_size = 20
    _initial_state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

    def _compress(self, block) -> None:
        w = list(struct.unpack('>16I', block))
        for t in range(16, 80):
            w.append(_rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))

        a, b, c, d, e = self._state
        for t in range(80):
            if t < 20:
                f, k = (b & c) | (~b & d), 0x5A827999
            elif t < 40:
                f, k = b ^ c ^ d, 0x6ED9EBA1
            elif t < 60:
                f, k = (b & c) | (b & d) | (c & d), 0x8F1BBCDC
            else:
                f, k = b ^ c ^ d, 0xCA62C1D6
            temp = (_rotl(a, 5) + f + e + k + w[t]) & _MASK
            a, b, c, d, e = temp, a, _rotl(b, 30), c, d

        self._state = [(s + v) & _MASK for s, v in zip(self._state, (a, b, c, d, e))]

    def _output(self) -> bytes:
        return struct.pack('>5I', *self._state)


def sha1(data=b'') -> bytes:
    """One-shot SHA-1 of ``data``."""
    h = Sha1()
    h.update(data)
    return h.result()
