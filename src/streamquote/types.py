from typing import Literal, Protocol, runtime_checkable

from anyio.abc import ByteReceiveStream, ByteSendStream

DelEscape = Literal["x", "u"]


@runtime_checkable
class ByteSource(Protocol):
    def readinto(self, buffer: memoryview, /) -> int | None:
        """Read up to ``len(buffer)`` bytes into buffer, returning 0 at end of input."""
        ...


@runtime_checkable
class ByteSink(Protocol):
    def write(self, data: bytes | memoryview, /) -> int | None:
        """Write data, returning how many bytes were accepted."""
        ...


class IConverter(Protocol):
    def convert(self, source: ByteSource, sink: ByteSink) -> int:
        """
        Convert the data in source, writing escaped output to sink.
        Returns the number of bytes written.
        """
        ...


class IAsyncConverter(Protocol):
    async def convert(self, source: ByteReceiveStream, sink: ByteSendStream) -> int:
        """
        Convert the data received from source, sending escaped output to sink.
        Returns the number of bytes sent.
        """
        ...
