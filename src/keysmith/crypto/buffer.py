"""Growable byte buffer for in-place AEAD operations."""

from __future__ import annotations

from ..errors import BufferCapacityError
from .constants import AES_GCM_SIV_TAG_SIZE


class AeadBuffer:
    """Byte workspace an AEAD operation encrypts or decrypts in place.

    Encryption appends the authentication tag after the existing content;
    decryption truncates it off again. A buffer may carry a capacity bound,
    in which case any growth past it raises BufferCapacityError.

    Attributes:
        capacity: Maximum length in bytes, or None for unbounded growth.
    """

    def __init__(self, initial: bytes = b"", capacity: int | None = None) -> None:
        """Initialize the buffer.

        Args:
            initial: Starting contents.
            capacity: Optional upper bound on the buffer length.

        Raises:
            ValueError: If capacity is negative.
            BufferCapacityError: If the initial contents exceed capacity.
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._data = bytearray()
        self.extend_from_slice(initial)

    @classmethod
    def for_plaintext(cls, length: int) -> AeadBuffer:
        """Create an empty buffer sized for a plaintext plus its tag.

        Args:
            length: Plaintext length in bytes.

        Returns:
            An empty buffer with capacity ``length + AES_GCM_SIV_TAG_SIZE``.
        """
        return cls(capacity=length + AES_GCM_SIV_TAG_SIZE)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"AeadBuffer(len={len(self._data)}, capacity={self.capacity})"

    @property
    def headroom(self) -> int | None:
        """Bytes that can still be appended, or None when unbounded."""
        if self.capacity is None:
            return None
        return self.capacity - len(self._data)

    def extend_from_slice(self, data: bytes) -> None:
        """Append bytes at the end of the buffer.

        Args:
            data: The bytes to append.

        Raises:
            BufferCapacityError: If the result would exceed capacity.
        """
        if self.capacity is not None and len(self._data) + len(data) > self.capacity:
            raise BufferCapacityError(
                f"Cannot append {len(data)} bytes: buffer holds {len(self._data)} "
                f"of {self.capacity}"
            )
        self._data.extend(data)

    def truncate(self, length: int) -> None:
        """Shrink the buffer to the given length.

        Args:
            length: The new length; must not exceed the current length.

        Raises:
            ValueError: If length is negative or larger than the buffer.
        """
        if length < 0 or length > len(self._data):
            raise ValueError(f"Cannot truncate buffer of {len(self._data)} bytes to {length}")
        del self._data[length:]

    def overwrite(self, offset: int, data: bytes) -> None:
        """Replace bytes in place without changing the buffer length.

        Args:
            offset: Index of the first byte to replace.
            data: Replacement bytes.

        Raises:
            ValueError: If the range falls outside the buffer.
        """
        end = offset + len(data)
        if offset < 0 or end > len(self._data):
            raise ValueError(
                f"Cannot overwrite bytes {offset}..{end} of buffer of {len(self._data)} bytes"
            )
        self._data[offset:end] = data

    def as_bytes(self) -> bytes:
        """Return the current contents."""
        return bytes(self._data)

    def clear(self) -> None:
        """Zero and empty the buffer."""
        self._data[:] = bytes(len(self._data))
        del self._data[:]
