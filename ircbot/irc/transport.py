"""Byte-stream transport feeding connection events (asyncio streams)."""

from __future__ import annotations

import asyncio
import codecs
from collections.abc import Callable
from typing import Any, Protocol

from ..constants import IRC_CONNECT_TIMEOUT, IRC_READ_CHUNK_SIZE
from ..errors.internal import TransportClosedError
from .models import TransportEvent

TransportListener = Callable[[TransportEvent, Any], None]


class Transport(Protocol):
    def write(self, data: str) -> None: ...

    def close(self) -> None: ...

    def is_closing(self) -> bool: ...


class TransportFactory(Protocol):
    def __call__(
        self,
        host: str,
        port: int,
        *,
        encoding: str,
        idle_timeout: float,
        listener: TransportListener,
    ) -> Transport: ...


class StreamTransport:
    """TCP transport built on ``asyncio.open_connection``.

    Construction schedules a task on the running loop that opens the socket
    and then reports everything through ``listener(event, payload)``, in order
    and from that one task:

    * ``CONNECT`` once the socket is open,
    * ``DATA`` with each decoded text chunk,
    * ``TIMEOUT`` whenever nothing arrived for ``idle_timeout`` seconds (reading
      continues afterwards),
    * ``END`` when the server closes its side,
    * ``CLOSE`` exactly once, last, with the exception that ended the stream or
      None.
    """

    def __init__(
        self,
        host: str,
        port: int,
        *,
        encoding: str,
        idle_timeout: float,
        listener: TransportListener,
        connect_timeout: float = IRC_CONNECT_TIMEOUT,
        chunk_size: int = IRC_READ_CHUNK_SIZE,
    ) -> None:
        self.host = host
        self.port = port
        self.encoding = encoding
        self.idle_timeout = idle_timeout
        self.connect_timeout = connect_timeout
        self.chunk_size = chunk_size
        self.listener = listener
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None
        self._closing = False
        self._close_emitted = False
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name=f"irc-transport-{host}:{port}"
        )
        # A task cancelled before it first runs never reaches its finally block.
        self._task.add_done_callback(lambda _task: self._emit_close(None))

    def write(self, data: str) -> None:
        if self.writer is None or self.is_closing():
            raise TransportClosedError(
                "Transport is not open", data={"host": self.host, "port": self.port}
            )
        self.writer.write(data.encode(self.encoding))

    def is_closing(self) -> bool:
        if self._closing:
            return True
        return self.writer is not None and self.writer.is_closing()

    def close(self) -> None:
        if self._closing:
            return
        self._closing = True
        self._task.cancel()

    async def wait_closed(self) -> None:
        await asyncio.gather(self._task, return_exceptions=True)

    async def _run(self) -> None:
        error: BaseException | None = None
        try:
            try:
                self.reader, self.writer = await asyncio.wait_for(
                    asyncio.open_connection(self.host, self.port),
                    timeout=self.connect_timeout,
                )
            except (OSError, TimeoutError) as e:
                error = e
                return
            self._emit(TransportEvent.CONNECT)
            await self._read_loop()
        except Exception as e:  # noqa: BLE001
            error = e
        finally:
            self._closing = True
            if self.writer is not None:
                self.writer.close()
            self._emit_close(error)

    async def _read_loop(self) -> None:
        assert self.reader is not None
        while True:
            try:
                chunk = await asyncio.wait_for(
                    self.reader.read(self.chunk_size), timeout=self.idle_timeout
                )
            except TimeoutError:
                self._emit(TransportEvent.TIMEOUT)
                continue
            if not chunk:
                tail = self._decoder.decode(b"", final=True)
                if tail:
                    self._emit(TransportEvent.DATA, tail)
                self._emit(TransportEvent.END)
                return
            text = self._decoder.decode(chunk)
            if text:
                self._emit(TransportEvent.DATA, text)

    def _emit_close(self, error: BaseException | None) -> None:
        if self._close_emitted:
            return
        self._close_emitted = True
        self._emit(TransportEvent.CLOSE, error)

    def _emit(self, event: TransportEvent, payload: Any = None) -> None:
        self.listener(event, payload)
