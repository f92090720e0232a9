import logging

from anyio import BrokenResourceError, ClosedResourceError, EndOfStream
from anyio.abc import ByteReceiveStream, ByteSendStream

from streamquote.error import (
    ConverterBusyError,
    SinkWriteError,
    SourceReadError,
    UnsupportedStreamError,
)
from streamquote.options import ConverterOptions
from streamquote.types import ByteSink, ByteSource
from streamquote.window import SlidingWindow

logger = logging.getLogger(__name__)


class _ConverterBase:
    def __init__(self, options: ConverterOptions | None = None, **overrides: object):
        if options is None:
            options = ConverterOptions.model_validate(overrides)
        else:
            options = options.with_overrides(**overrides)
        self._options = options
        self._window = SlidingWindow(options.buffer_size, options.del_escape)
        self._running = False

    @property
    def options(self) -> ConverterOptions:
        return self._options

    def _begin(self) -> None:
        """
        Mark the instance busy and reset the window.

        The busy flag catches re-entrant calls and overlapping async tasks.
        It is not a lock: two threads racing into ``convert`` are not detected.
        """
        if self._running:
            raise ConverterBusyError(
                f"{self.__class__.__name__} instances cannot run overlapping conversions"
            )
        self._running = True
        self._window.reset()
        logger.debug(
            "Starting conversion with a %d byte window", self._window.capacity
        )

    def _finish(self) -> None:
        self._running = False


class Converter(_ConverterBase):
    r"""
    Streaming version of the string-literal quoting convention.

    Escapes control and non-printable characters (``\t``, ``\n``, ``\xff``,
    ``\u00a0``) while copying source to sink through one fixed-size buffer.
    No surrounding quotes are written. Not safe for concurrent use.
    """

    def convert(self, source: ByteSource, sink: ByteSink) -> int:
        if not isinstance(source, ByteSource):
            raise UnsupportedStreamError("source", type(source).__name__, "ByteSource")
        if not isinstance(sink, ByteSink):
            raise UnsupportedStreamError("sink", type(sink).__name__, "ByteSink")
        self._begin()
        try:
            return self._convert(source, sink)
        finally:
            self._finish()

    def _convert(self, source: ByteSource, sink: ByteSink) -> int:
        window = self._window
        next_token = window.next_token
        written = 0
        exhausted = False

        while True:
            if not exhausted and window.needs_refill():
                free = window.compact()
                try:
                    read = source.readinto(free)
                except (OSError, ValueError) as exc:
                    # ValueError: reading from a closed file
                    logger.debug("Source failed after %d byte(s) written", written)
                    raise SourceReadError(written, str(exc)) from exc
                if read is None:
                    raise SourceReadError(
                        written, "source has no data available; sources must block"
                    )
                window.commit(read)
                exhausted = read == 0
                logger.debug(
                    "Refilled window with %d byte(s), %d pending", read, window.pending
                )
                continue

            if window.is_empty():
                break

            written = self._write(sink, next_token(), written)

        logger.debug("Conversion finished, %d byte(s) written", written)
        return written

    def _write(self, sink: ByteSink, token: bytes, written: int) -> int:
        """Write all of token, returning the updated count of bytes the sink accepted."""
        offset = 0
        while offset < len(token):
            data = token if offset == 0 else memoryview(token)[offset:]
            try:
                accepted = sink.write(data)
            except (OSError, ValueError) as exc:
                logger.debug("Sink failed after %d byte(s) written", written)
                raise SinkWriteError(written, str(exc)) from exc
            if not accepted:
                raise SinkWriteError(
                    written, "sink accepted no data; sinks must block"
                )
            # raw sinks may take part of the token
            offset += accepted
            written += accepted
        return written


class AsyncConverter(_ConverterBase):
    """
    Converter over anyio byte streams. Emits exactly the same bytes as
    :class:`Converter`, sending one token per escaped codepoint.
    """

    async def convert(self, source: ByteReceiveStream, sink: ByteSendStream) -> int:
        if not isinstance(source, ByteReceiveStream):
            raise UnsupportedStreamError(
                "source", type(source).__name__, "ByteReceiveStream"
            )
        if not isinstance(sink, ByteSendStream):
            raise UnsupportedStreamError("sink", type(sink).__name__, "ByteSendStream")
        self._begin()
        try:
            return await self._convert(source, sink)
        finally:
            self._finish()

    async def _convert(self, source: ByteReceiveStream, sink: ByteSendStream) -> int:
        window = self._window
        written = 0
        exhausted = False

        while True:
            if not exhausted and window.needs_refill():
                free = len(window.compact())
                try:
                    chunk = await source.receive(free)
                except EndOfStream:
                    chunk = b""
                except (OSError, BrokenResourceError, ClosedResourceError) as exc:
                    logger.debug("Source failed after %d byte(s) written", written)
                    raise SourceReadError(written, repr(exc)) from exc
                if len(chunk) > free:
                    raise SourceReadError(
                        written,
                        f"source returned {len(chunk)} byte(s), more than the {free} requested",
                    )
                window.fill(chunk)
                exhausted = not chunk
                logger.debug(
                    "Refilled window with %d byte(s), %d pending",
                    len(chunk),
                    window.pending,
                )
                continue

            if window.is_empty():
                break

            token = window.next_token()
            try:
                await sink.send(token)
            except (OSError, BrokenResourceError, ClosedResourceError) as exc:
                logger.debug("Sink failed after %d byte(s) written", written)
                raise SinkWriteError(written, repr(exc)) from exc
            written += len(token)

        logger.debug("Conversion finished, %d byte(s) written", written)
        return written
