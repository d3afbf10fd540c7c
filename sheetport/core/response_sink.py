# sheetport/core/response_sink.py
"""
Response Sink - Destination of a file download

An export ends by handing headers and the encoded file to a ResponseSink
and finishing it. A finished sink refuses further headers and writes.

Implementations:
- BufferedResponseSink: Keeps headers and body in memory (web frameworks, tests)
- StreamResponseSink: Writes the body to a binary stream (stdout by default)

Usage Example:
    sink = BufferedResponseSink()
    adapter.export_records(rows, "report", sink=sink)
    response = make_response(sink.body, headers=sink.headers)
"""
import io
import logging
import sys
from abc import ABC, abstractmethod
from typing import BinaryIO, Dict, Optional

from sheetport.core.exceptions import ResponseFinishedError

logger = logging.getLogger("sheetport")


class ResponseSink(ABC):
    """
    Abstract base class for response sinks.

    Attributes:
        headers: Headers set so far, in order
        finished: Whether finish() was called
    """

    def __init__(self):
        self._headers: Dict[str, str] = {}
        self._finished = False
        self._logger = logging.getLogger(f"sheetport.{self.__class__.__name__}")

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def finished(self) -> bool:
        return self._finished

    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value."""
        self._ensure_open()
        self._headers[name] = value

    def write(self, data: bytes) -> None:
        """Append bytes to the response body."""
        self._ensure_open()
        self._write(data)

    def finish(self) -> None:
        """End the response. Later calls are no-ops; later writes fail."""
        if self._finished:
            return
        self._finished = True
        self._finish()
        self._logger.debug(f"Response finished with headers: {list(self._headers)}")

    @abstractmethod
    def _write(self, data: bytes) -> None:
        pass

    def _finish(self) -> None:
        pass

    def _ensure_open(self) -> None:
        if self._finished:
            raise ResponseFinishedError("Response already finished")


class BufferedResponseSink(ResponseSink):
    """Collects the response in memory."""

    def __init__(self):
        super().__init__()
        self._buffer = io.BytesIO()

    @property
    def body(self) -> bytes:
        return self._buffer.getvalue()

    def _write(self, data: bytes) -> None:
        self._buffer.write(data)


class StreamResponseSink(ResponseSink):
    """
    Writes the body to a binary stream.

    Headers are recorded and logged; a plain stream has nowhere to put them.

    Args:
        stream: Writable binary stream (default: the process's stdout)
    """

    def __init__(self, stream: Optional[BinaryIO] = None):
        super().__init__()
        self._stream = stream if stream is not None else sys.stdout.buffer

    def set_header(self, name: str, value: str) -> None:
        super().set_header(name, value)
        self._logger.debug(f"Header {name}: {value}")

    def _write(self, data: bytes) -> None:
        self._stream.write(data)

    def _finish(self) -> None:
        self._stream.flush()


__all__ = [
    "ResponseSink",
    "BufferedResponseSink",
    "StreamResponseSink",
]
