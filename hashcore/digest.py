# digest.py
# Defines the Digest contract shared by every hash backend and the
# Merkle-Damgard block buffering they all build on.

from abc import ABC, abstractmethod

from hashcore.buffers import byte_view


class DigestFinalizedError(RuntimeError):
    """Raised when a finalized digest is used again without reset()."""


class Digest(ABC):
    """Hash algorithm interface.

    Subclasses fix ``block_size`` (bytes consumed per compression step) and
    ``digest_size`` (bytes returned by ``result``). Both are class constants
    and never change at runtime.

    ``result`` finalizes the instance; call ``reset`` before feeding it again.
    """

    name = None
    block_size = 0
    digest_size = 0

    @classmethod
    def new(cls):
        return cls()

    @abstractmethod
    def reset(self) -> None:
        ...

    @abstractmethod
    def update(self, data) -> None:
        ...

    @abstractmethod
    def result(self) -> bytes:
        ...


class BlockDigest(Digest):
    """Digest over fixed-size blocks with MD4-family padding.

    Subclasses provide ``_initial_state``, ``_compress(block)`` and
    ``_output()``, and may override the length field size and byte order.
    """

    length_size = 8
    length_byteorder = 'big'
    _initial_state = ()

    def __init__(self):
        self._block = bytearray(self.block_size)
        self.reset()

    def reset(self) -> None:
        self._state = list(self._initial_state)
        self._block[:] = bytes(self.block_size)
        self._buffered = 0
        self._length = 0
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_open(self):
        if self._finalized:
            raise DigestFinalizedError(
                f'{type(self).__name__} already finalized; call reset() before reuse'
            )

    def update(self, data) -> None:
        self._ensure_open()
        view = byte_view(data)
        size = len(view)
        if not size:
            return
        self._length += size
        block_size = self.block_size
        pos = 0

        # top up a partially filled block first
        if self._buffered:
            take = min(block_size - self._buffered, size)
            self._block[self._buffered:self._buffered + take] = view[:take]
            self._buffered += take
            pos = take
            if self._buffered < block_size:
                return
            self._compress(self._block)
            self._buffered = 0

        while size - pos >= block_size:
            self._compress(view[pos:pos + block_size])
            pos += block_size

        rest = size - pos
        if rest:
            self._block[:rest] = view[pos:]
            self._buffered = rest

    def result(self) -> bytes:
        self._ensure_open()
        block = self._block
        block_size = self.block_size
        length_at = block_size - self.length_size
        bit_length = (self._length * 8) % (1 << (8 * self.length_size))

        block[self._buffered] = 0x80
        tail = self._buffered + 1
        if tail > length_at:
            # no room for the length field, spill into one more block
            block[tail:] = bytes(block_size - tail)
            self._compress(block)
            tail = 0
        block[tail:length_at] = bytes(length_at - tail)
        block[length_at:] = bit_length.to_bytes(self.length_size, self.length_byteorder)
        self._compress(block)

        self._finalized = True
        return self._output()

    @abstractmethod
    def _compress(self, block) -> None:
        ...

    @abstractmethod
    def _output(self) -> bytes:
        ...

    def __repr__(self):
        state = 'finalized' if self._finalized else f'{self._length} bytes absorbed'
        return f'<{type(self).__name__} {state}>'
