"""
Adalight frame layout: one fixed-size byte buffer per strip.

Wire format::

    offset 0..2   'A' 'd' 'a'
    offset 3..4   0x00 0x00
    offset 5      min(led_count, 255)
    offset 6..    R0 G0 B0 R1 G1 B1 ... R(N-1) G(N-1) B(N-1)

The header is written once in :meth:`FrameBuffer.__init__` and never
touched again; only the payload changes.  This module does no I/O; the
byte sink belongs to :mod:`~adalight_strip.transport`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .color import Color
from .constants import BYTES_PER_LED, HEADER_SIZE, MAGIC, MAX_HEADER_COUNT
from .exceptions import ConfigurationError, IndexRangeError, LengthMismatchError

logger = logging.getLogger(__name__)


def frame_size(led_count: int) -> int:
    """Return the total frame length in bytes for *led_count* LEDs."""
    return HEADER_SIZE + BYTES_PER_LED * led_count


def _validate_led_count(led_count: int) -> None:
    if isinstance(led_count, bool) or not isinstance(led_count, int):
        raise ConfigurationError(f"led_count must be an integer, got {led_count!r}")
    if led_count < 1:
        raise ConfigurationError(f"led_count must be >= 1, got {led_count}")


class FrameBuffer:
    """The byte buffer for one Adalight frame.

    Args:
        led_count: Number of LEDs on the strip.  Counts above 255 are
            accepted, but the header count byte is capped at 255 (see
            :attr:`is_count_truncated`).

    Raises:
        ConfigurationError: If *led_count* is not a positive integer.
    """

    def __init__(self, led_count: int) -> None:
        _validate_led_count(led_count)
        self._led_count = led_count
        self._buf = bytearray(frame_size(led_count))
        self._write_header()

    def _write_header(self) -> None:
        self._buf[0:3] = MAGIC
        self._buf[3] = 0
        self._buf[4] = 0
        self._buf[5] = min(self.led_count, MAX_HEADER_COUNT)
        logger.debug("Frame header: %s", self.header.hex(" "))

    @property
    def led_count(self) -> int:
        return self._led_count

    # -- Header -------------------------------------------------------------

    @property
    def header(self) -> bytes:
        return bytes(self._buf[:HEADER_SIZE])

    @property
    def header_count(self) -> int:
        """The count byte as it goes on the wire."""
        return self._buf[5]

    @property
    def is_count_truncated(self) -> bool:
        """``True`` if the strip is longer than the header can describe."""
        return self.led_count > MAX_HEADER_COUNT

    # -- Payload ------------------------------------------------------------

    def _offset(self, index: int) -> int:
        if not (0 <= index < self.led_count):
            raise IndexRangeError(
                f"LED index {index} out of range (0-{self.led_count - 1})"
            )
        return HEADER_SIZE + BYTES_PER_LED * index

    def set_pixel(self, index: int, color: Color) -> None:
        """Write one RGB triple into the payload."""
        offset = self._offset(index)
        self._buf[offset : offset + BYTES_PER_LED] = bytes(color.as_tuple())

    def get_pixel(self, index: int) -> Color:
        offset = self._offset(index)
        r, g, b = self._buf[offset : offset + BYTES_PER_LED]
        return Color(r, g, b)

    def set_pixels(self, colors: Sequence[Color]) -> None:
        """Overwrite the whole payload.

        Raises:
            LengthMismatchError: If ``len(colors) != led_count``.  Nothing is
                written in that case.
        """
        if len(colors) != self.led_count:
            raise LengthMismatchError(
                f"LED count mismatch: expected {self.led_count}, got {len(colors)}"
            )
        payload = bytearray()
        for color in colors:
            payload += bytes(color.as_tuple())
        self._buf[HEADER_SIZE:] = payload

    def pixels(self) -> list[Color]:
        """Decode the payload back into colors, in strip order."""
        return [self.get_pixel(i) for i in range(self.led_count)]

    @property
    def payload(self) -> bytes:
        return bytes(self._buf[HEADER_SIZE:])

    # -- Output -------------------------------------------------------------

    def as_bytes(self) -> bytes:
        """Return the full frame, header included, ready for the sink."""
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self) -> str:
        return f"FrameBuffer(led_count={self.led_count})"
