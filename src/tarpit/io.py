"""
Byte-level collaborators for the ``.`` and ``,`` instructions.

Sinks take one cell value per write. Sources hand back one byte per read:
``0`` means "no data yet" and ``None`` means the input is exhausted.
"""
from __future__ import annotations

import os
import sys
from typing import BinaryIO, Optional, Protocol

try:
    import termios
    import tty
except ImportError:  # no raw mode on Windows
    termios = None
    tty = None


class ByteSink(Protocol):
    def write_byte(self, value: int) -> None: ...


class ByteSource(Protocol):
    def read_byte(self) -> Optional[int]: ...


class StreamSink:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write_byte(self, value: int) -> None:
        self.stream.write(bytes((value,)))
        self.stream.flush()


class StreamSource:
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> Optional[int]:
        data = self.stream.read(1)
        if not data:
            return None
        return data[0]


class RawTerminalSource:
    """Read single keypresses from a tty without line buffering or echo."""

    def __init__(self, fd: int):
        if termios is None:
            raise OSError("raw terminal input requires termios")
        self.fd = fd

    def read_byte(self) -> Optional[int]:
        saved = termios.tcgetattr(self.fd)
        try:
            tty.setraw(self.fd, termios.TCSANOW)
            data = os.read(self.fd, 1)
        finally:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, saved)
        if not data:
            return None
        return data[0]


def open_output(stream: Optional[BinaryIO] = None) -> StreamSink:
    return StreamSink(stream if stream is not None else sys.stdout.buffer)


def open_input(stream: Optional[BinaryIO] = None) -> ByteSource:
    """Pick raw terminal reads for an interactive stdin, plain reads otherwise."""
    if stream is not None:
        return StreamSource(stream)
    if termios is not None and sys.stdin.isatty():
        return RawTerminalSource(sys.stdin.fileno())
    return StreamSource(sys.stdin.buffer)
