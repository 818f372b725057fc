# md5.py
# MD5 backend (RFC 1321): 64-byte blocks, 16-byte digest.

import math
import struct

from hashcore.digest import BlockDigest

_MASK = 0xFFFFFFFF

# per-round left rotation amounts
_SHIFTS = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4

# T[i] = floor(abs(sin(i + 1)) * 2**32)
_T = tuple(int(abs(math.sin(i + 1)) * 2 ** 32) & _MASK for i in range(64))

# message word consumed by each step
_INDEX = tuple(
    i if i < 16 else
    (5 * i + 1) % 16 if i < 32 else
    (3 * i + 5) % 16 if i < 48 else
    (7 * i) % 16
    for i in range(64)
)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


class Md5(BlockDigest):
    name = 'md5'
    block_size = 64
    digest_size = 16
    length_byteorder = 'little'
    _initial_state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

    def _compress(self, block) -> None:
        x = struct.unpack('<16I', block)
        a, b, c, d = self._state

        for i in range(64):
            if i < 16:
                f = (b & c) | (~b & d)
            elif i < 32:
                f = (d & b) | (~d & c)
            elif i < 48:
                f = b ^ c ^ d
            else:
                f = c ^ (b | (~d & _MASK))
            f = (f + a + _T[i] + x[_INDEX[i]]) & _MASK
            a, d, c = d, c, b
            b = (b + _rotl(f, _SHIFTS[i])) & _MASK

        self._state = [(s + v) & _MASK for s, v in zip(self._state, (a, b, c, d))]

    def _output(self) -> bytes:
        return struct.pack('<4I', *self._state)


def md5(data=b'') -> bytes:
    """One-shot MD5 of ``data``."""
    h = Md5()
    h.update(data)
    return h.result()
