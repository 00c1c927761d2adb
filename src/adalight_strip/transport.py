"""
Byte sinks for Adalight frames.

A sink only knows how to open, push raw bytes, and close.  It knows nothing
about what a frame means, that's :mod:`frame`'s job.

Typical usage (via :class:`~adalight_strip.controller.LedController`)::

    transport = SerialTransport("/dev/ttyUSB0")
    transport.open()
    transport.write(frame.as_bytes())
    transport.close()
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import serial

from .constants import DEFAULT_BAUD, DEFAULT_PORT, DEFAULT_TIMEOUT
from .exceptions import ConnectionError, NotOpenError, TransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class ByteSink(Protocol):
    """What :class:`~adalight_strip.controller.LedController` needs from a sink.

    ``open`` and ``write`` signal failure either by raising (typically
    :class:`ConnectionError` or :class:`TransportError`) or by returning
    ``False``; ``None`` and ``True`` both mean success.  ``close`` must be
    safe to call repeatedly.
    """

    @property
    def is_open(self) -> bool: ...

    def open(self) -> bool | None: ...

    def write(self, data: bytes) -> bool | None: ...

    def close(self) -> None: ...


class SerialTransport:
    """Serial port sink for an Adalight receiver.

    Args:
        port: Serial port path (e.g. ``/dev/ttyUSB0`` or ``COM3``).
        baudrate: Baud rate (default 115200).
        timeout: Read and write timeout in seconds.  A frame that cannot be
            pushed out within this window is reported as a
            :class:`TransportError`.
    """

    def __init__(
        self,
        port: str = DEFAULT_PORT,
        baudrate: int = DEFAULT_BAUD,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self._ser: serial.Serial | None = None

    # -- Lifecycle ----------------------------------------------------------

    def open(self) -> None:
        """Open the serial port (8N1, no handshake).

        Raises:
            ConnectionError: If the port cannot be opened.
        """
        logger.info("Opening serial port %s at %d baud", self.port, self.baudrate)
        try:
            self._ser = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
                timeout=self.timeout,
                write_timeout=self.timeout,
            )
        except (serial.SerialException, OSError) as exc:
            raise ConnectionError(f"Cannot open {self.port}: {exc}") from exc

    def close(self) -> None:
        """Close the serial port (safe to call multiple times)."""
        if self._ser and self._ser.is_open:
            self._ser.close()
            logger.info("Serial port %s closed", self.port)

    @property
    def is_open(self) -> bool:
        """Return ``True`` if the serial port is currently open."""
        return self._ser is not None and self._ser.is_open

    # -- I/O ----------------------------------------------------------------

    def write(self, data: bytes) -> None:
        """Push *data* to the port in one write and flush it.

        Raises:
            NotOpenError: If the port is not open.
            TransportError: If the write times out, fails, or is short.
        """
        ser = self._require_open()
        logger.debug("TX %d bytes", len(data))
        try:
            written = ser.write(data)
            ser.flush()
        except serial.SerialTimeoutException as exc:
            raise TransportError(f"Write to {self.port} timed out: {exc}") from exc
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Write to {self.port} failed: {exc}") from exc

        if written is not None and written != len(data):
            raise TransportError(f"Short write to {self.port}: {written}/{len(data)} bytes")

    # -- Internal -----------------------------------------------------------

    def _require_open(self) -> serial.Serial:
        """Return the open serial port or raise."""
        if not self.is_open:
            raise NotOpenError(f"Serial port {self.port} is not open")
        assert self._ser is not None  # for type-checker
        return self._ser


class MemoryTransport:
    """In-process sink that keeps every frame it is given.

    Useful for dry runs and for tests.  Set *fail_open* or *fail_write* to
    simulate a busy port or a dropped link.
    """

    def __init__(self, fail_open: bool = False, fail_write: bool = False) -> None:
        self.fail_open = fail_open
        self.fail_write = fail_write
        self.frames: list[bytes] = []
        self.open_count = 0
        self._open = False

    def open(self) -> None:
        if self.fail_open:
            raise ConnectionError("Cannot open memory transport: simulated failure")
        self._open = True
        self.open_count += 1

    def close(self) -> None:
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def write(self, data: bytes) -> None:
        if not self._open:
            raise NotOpenError("Memory transport is not open")
        if self.fail_write:
            raise TransportError("Write to memory transport failed: simulated failure")
        self.frames.append(bytes(data))

    @property
    def last_frame(self) -> bytes | None:
        return self.frames[-1] if self.frames else None
