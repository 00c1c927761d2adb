"""
Adalight LED strip controller.

Clean Python API for driving an addressable RGB strip through an
Adalight-protocol receiver (Skydimo and compatible boards).

Protocol details:
    - Baud: 115200, 8N1, no handshake
    - Frame: ``Ada`` + 0x00 0x00 + count byte + one RGB triple per LED
    - No acknowledgement; every color change retransmits the full frame

Recoverable failures (closed port, bad index, wrong length, dropped write)
are returned as a :class:`WriteResult` instead of raised.  The controller
is not thread safe; serialize calls if several threads share one strip.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .color import BLACK, Color, hsv_to_rgb, lerp_color
from .constants import DEFAULT_BAUD, DEFAULT_PORT, DEFAULT_TIMEOUT, MAX_HEADER_COUNT
from .exceptions import (
    AdalightError,
    IndexRangeError,
    LengthMismatchError,
    NotOpenError,
    TransportError,
)
from .frame import FrameBuffer
from .transport import ByteSink, SerialTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of one color operation.

    Truthy on success.  On failure :attr:`error` holds the
    :class:`~adalight_strip.exceptions.AdalightError` describing why.
    """

    success: bool
    error: Optional[AdalightError] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def message(self) -> str:
        if self.success:
            return "ok"
        return f"{type(self.error).__name__}: {self.error}"

    @classmethod
    def ok(cls) -> WriteResult:
        return cls(True)

    @classmethod
    def failed(cls, error: AdalightError) -> WriteResult:
        return cls(False, error)


class LedController:
    """Drive an Adalight LED strip through a byte sink.

    Use as a context manager for automatic open/close::

        with LedController.for_port('/dev/ttyUSB0', led_count=60) as strip:
            strip.fill((255, 0, 0))

    ``__enter__`` does not raise if the port cannot be opened; check
    :attr:`is_open` (or the results of the color operations).

    Args:
        transport: The byte sink frames are written to.  Not opened here.
        led_count: Number of LEDs on the strip.
        baud_rate: Informational; the baud rate actually lives in the sink.
        log: Logger for driver events.  Defaults to this module's logger.

    Raises:
        ConfigurationError: If *led_count* is not a positive integer.
    """

    def __init__(
        self,
        transport: ByteSink,
        led_count: int,
        baud_rate: int = DEFAULT_BAUD,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._frame = FrameBuffer(led_count)
        self._transport = transport
        self._led_count = led_count
        self.baud_rate = baud_rate
        self._log = log or logger
        self._current: tuple[Color, ...] = (BLACK,) * led_count

        if self._frame.is_count_truncated:
            self._log.warning(
                "%d LEDs configured but the Adalight header count byte caps at %d",
                led_count,
                MAX_HEADER_COUNT,
            )
        self._log.debug("Frame buffer ready: %d LEDs, %d bytes", led_count, len(self._frame))

    @classmethod
    def for_port(
        cls,
        port: str = DEFAULT_PORT,
        led_count: int = 60,
        baud_rate: int = DEFAULT_BAUD,
        timeout: float = DEFAULT_TIMEOUT,
        log: Optional[logging.Logger] = None,
    ) -> LedController:
        """Build a controller on a :class:`SerialTransport`."""
        transport = SerialTransport(port, baudrate=baud_rate, timeout=timeout)
        return cls(transport, led_count, baud_rate=baud_rate, log=log)

    # -- Context manager ----------------------------------------------------

    def __enter__(self) -> LedController:
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # -- Connection ---------------------------------------------------------

    def open(self) -> bool:
        """Open the byte sink.

        Returns:
            ``True`` if the sink is open (including when it already was),
            ``False`` if it could not be opened.
        """
        if self._transport.is_open:
            return True
        try:
            opened = self._transport.open()
        except (AdalightError, OSError) as exc:
            self._log.error("Error opening byte sink: %s", exc)
            return False
        if opened is False or not self._transport.is_open:
            self._log.error("Error opening byte sink: sink reported failure")
            return False
        self._log.info("Opened byte sink for %d LEDs", self._led_count)
        return True

    def close(self) -> None:
        """Close the byte sink (safe to call multiple times)."""
        if not self._transport.is_open:
            return
        self._transport.close()
        self._log.info("Byte sink closed")

    @property
    def is_open(self) -> bool:
        return self._transport.is_open

    # -- State --------------------------------------------------------------

    @property
    def led_count(self) -> int:
        return self._led_count

    @property
    def current_colors(self) -> tuple[Color, ...]:
        """Colors from the last successful write, in strip order."""
        return self._current

    @property
    def frame(self) -> bytes:
        """The frame as it currently sits in the buffer."""
        return self._frame.as_bytes()

    # -- Write path ---------------------------------------------------------

    def write_colors(self, colors: Sequence[Color | Sequence[int]]) -> WriteResult:
        """Stage *colors* into the frame and transmit it.

        The color cache only advances once the sink accepted the frame.  If
        the sink is closed or the write fails, the buffer payload is rolled
        back to the last successful write.
        """
        if len(colors) != self._led_count:
            error = LengthMismatchError(
                f"LED count mismatch: expected {self._led_count}, got {len(colors)}"
            )
            self._log.warning("%s", error)
            return WriteResult.failed(error)

        staged = tuple(Color.coerce(c) for c in colors)
        self._frame.set_pixels(staged)

        result = self._transmit()
        if result:
            self._current = staged
        else:
            self._frame.set_pixels(self._current)
        return result

    def refresh(self) -> WriteResult:
        """Retransmit the last successful frame unchanged.

        Call this periodically from a keep-alive loop; Adalight receivers
        blank the strip when no frame arrives for a while.
        """
        return self._transmit()

    def _transmit(self) -> WriteResult:
        if not self._transport.is_open:
            error = NotOpenError("Byte sink is not open")
            self._log.warning("%s", error)
            return WriteResult.failed(error)
        try:
            sent = self._transport.write(self._frame.as_bytes())
        except AdalightError as exc:
            self._log.warning("Error writing frame: %s", exc)
            return WriteResult.failed(exc)
        except OSError as exc:
            error = TransportError(f"Write failed: {exc}")
            self._log.warning("Error writing frame: %s", error)
            return WriteResult.failed(error)
        if sent is False:
            error = TransportError("Byte sink rejected the frame")
            self._log.warning("Error writing frame: %s", error)
            return WriteResult.failed(error)
        return WriteResult.ok()

    # -- Color operations ---------------------------------------------------

    def fill(self, color: Color | Sequence[int]) -> WriteResult:
        """Set every LED to *color*."""
        color = Color.coerce(color)
        return self.write_colors([color] * self._led_count)

    def clear(self) -> WriteResult:
        """Turn every LED off."""
        return self.fill(BLACK)

    def set_led(self, index: int, color: Color | Sequence[int]) -> WriteResult:
        """Change one LED, keeping the others at their last written color.

        The protocol has no partial update, so the whole strip is resent.
        """
        if isinstance(index, bool) or not isinstance(index, int) or not (
            0 <= index < self._led_count
        ):
            error = IndexRangeError(
                f"LED index {index} out of range (0-{self._led_count - 1})"
            )
            self._log.warning("%s", error)
            return WriteResult.failed(error)

        colors = list(self._current)
        colors[index] = Color.coerce(color)
        return self.write_colors(colors)

    def rainbow(self, offset: int = 0) -> WriteResult:
        """Spread one full hue cycle across the strip.

        Args:
            offset: Shift in LEDs; step it each frame to animate the cycle.
        """
        n = self._led_count
        colors = [hsv_to_rgb((i + offset) / n * 360.0, 1.0, 1.0) for i in range(n)]
        return self.write_colors(colors)

    def gradient(
        self,
        start: Color | Sequence[int],
        end: Color | Sequence[int],
    ) -> WriteResult:
        """Fade linearly from *start* on LED 0 to *end* on the last LED.

        A single-LED strip shows *start*.
        """
        start = Color.coerce(start)
        end = Color.coerce(end)
        n = self._led_count
        colors = [lerp_color(start, end, i / (n - 1) if n > 1 else 0.0) for i in range(n)]
        return self.write_colors(colors)


# ---------------------------------------------------------------------------
# Convenience factory
# ---------------------------------------------------------------------------


def get_controller(port: str = DEFAULT_PORT, led_count: int = 60) -> LedController:
    """Return a serial-backed controller instance (use as a context manager).

    Example::

        with get_controller('/dev/ttyUSB0', 60) as strip:
            strip.rainbow()
    """
    return LedController.for_port(port, led_count)
