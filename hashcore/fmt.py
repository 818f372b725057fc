# fmt.py
# Lowercase hexadecimal rendering of digest bytes.

from hashcore.buffers import byte_view

HEX_ALPHABET = '0123456789abcdef'


class DigestFmt:
    """Hex display wrapper around any bytes-like buffer.

    Pairs of hex characters are produced one byte at a time, so ``write`` can
    stream into a file or ``io.StringIO`` without building the whole string::

        print(DigestFmt(Sha256.new().result()))
    """

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __iter__(self):
        for byte in byte_view(self.value):
            yield HEX_ALPHABET[byte >> 4] + HEX_ALPHABET[byte & 0xF]

    def __len__(self):
        return 2 * memoryview(self.value).nbytes

    def write(self, out) -> int:
        """Write the hex form into ``out`` (anything with ``write(str)``)."""
        written = 0
        for pair in self:
            out.write(pair)
            written += 2
        return written

    def __str__(self):
        return ''.join(self)

    def __format__(self, format_spec):
        return format(str(self), format_spec)

    def __repr__(self):
        return f'DigestFmt({str(self)!r})'
