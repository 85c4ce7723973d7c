from typing import Callable, Optional

import structlog

logger = structlog.get_logger(__name__)

TERMINATOR = b"\0"

# Returned by append() when a chunk could not be stored
REJECTED = 0


class ResponseAccumulator:
    """
    Growable byte buffer that assembles a response delivered in chunks.

    The buffer always ends with a NUL terminator that is not part of the
    content, so the content can be handed to consumers expecting C-style text.
    One accumulator serves exactly one fetch: it is either handed off with
    take() or released.
    """

    def __init__(self, on_chunk: Optional[Callable[[int], None]] = None):
        self._buffer: Optional[bytearray] = bytearray(TERMINATOR)
        self._on_chunk = on_chunk

    def __enter__(self) -> "ResponseAccumulator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._buffer is None

    @property
    def size(self) -> int:
        if self._buffer is None:
            return 0
        return len(self._buffer) - 1

    @property
    def content(self) -> bytes:
        """Accumulated bytes without the terminator."""
        if self._buffer is None:
            return b""
        return bytes(self._buffer[:-1])

    @property
    def raw(self) -> bytes:
        """Accumulated bytes including the NUL terminator."""
        if self._buffer is None:
            return b""
        return bytes(self._buffer)

    def append(self, chunk: bytes) -> int:
        """
        Append a chunk to the buffer.

        Args:
            chunk: Bytes received from the transport

        Returns:
            len(chunk) when the chunk was stored in full, REJECTED otherwise
        """
        if self._buffer is None:
            logger.warning("Chunk received after accumulator was released", size=len(chunk))
            return REJECTED

        try:
            # Replace the terminator with the chunk and a new terminator
            self._buffer[-1:] = chunk
            self._buffer += TERMINATOR
        except MemoryError:
            logger.error("Failed to grow response buffer", size=self.size, chunk_size=len(chunk))
            self.release()
            return REJECTED

        logger.debug("Received data chunk", size=len(chunk), total=self.size)
        if self._on_chunk is not None:
            self._on_chunk(len(chunk))
        return len(chunk)

    def take(self) -> bytes:
        """Hand the content off to the caller and release the buffer."""
        content = self.content
        self.release()
        return content

    def release(self) -> None:
        self._buffer = None
