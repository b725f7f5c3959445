#
# src/cargo_testify/runner/capture.py
#
"""
Drains one output stream of a running child process line by line.
"""
import asyncio
from collections.abc import Callable
from typing import TypeAlias

import structlog

from cargo_testify.exceptions import CaptureError
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runner.capture")

READ_CHUNK_SIZE = 64 * 1024

LineSink: TypeAlias = Callable[[str], None]


class StreamCapturer:
    """
    Reads a stream until EOF, echoing each line and collecting the full text.

    The collected lines belong to this capturer alone; the text is handed back
    as the result of `capture()` once the stream is exhausted.
    """

    def __init__(
        self,
        stream: asyncio.StreamReader,
        name: str,
        echo: LineSink | None = None,
    ):
        self._stream = stream
        self._name = name
        self._echo = echo
        self._log = log.bind(stream=name)

    async def capture(self) -> str:
        """
        Consumes the stream to EOF and returns every line followed by a newline.

        Raises:
            CaptureError: If reading fails or a line is not valid UTF-8.
        """
        lines: list[str] = []
        pending = bytearray()

        while True:
            try:
                chunk = await self._stream.read(READ_CHUNK_SIZE)
            except (OSError, asyncio.IncompleteReadError) as e:
                self._log.error("Reading from stream failed", error=str(e), lines_read=len(lines))
                raise CaptureError("Stream broke before end of output", self._name, details=e) from e

            if not chunk:
                break

            # Lines completed by this chunk end at its last newline; the rest stays pending.
            end = chunk.rfind(b"\n")
            if end == -1:
                pending += chunk
                continue

            pending += chunk[:end]
            for raw_line in bytes(pending).split(b"\n"):
                self._accept(raw_line, lines)
            pending = bytearray(chunk[end + 1:])

        if pending:
            self._accept(bytes(pending), lines)

        self._log.debug("Stream drained", lines_read=len(lines))
        return "".join(f"{line}\n" for line in lines)

    def _accept(self, raw_line: bytes, lines: list[str]) -> None:
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError as e:
            self._log.error("Undecodable line in stream", line_number=len(lines) + 1)
            raise CaptureError(f"Line {len(lines) + 1} is not valid UTF-8", self._name, details=e) from e

        lines.append(line)
        if self._echo is not None:
            self._echo(line)

# 🔼⚙️
