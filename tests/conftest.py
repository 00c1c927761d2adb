"""Shared pytest fixtures for Adalight strip tests."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from adalight_strip import LedController
from adalight_strip.transport import MemoryTransport, SerialTransport


class FakeSerial:
    """Lightweight stand-in for ``serial.Serial``.

    Implements the subset of the pyserial API used by
    :class:`~adalight_strip.transport.SerialTransport`:
    ``write``, ``flush``, ``close``, and ``is_open``.

    Every ``write`` is recorded in :attr:`written`.  Set :attr:`fail_with`
    to an exception instance to make the next writes raise it, or
    :attr:`short_by` to report fewer bytes written than requested.
    """

    def __init__(self) -> None:
        self.is_open: bool = True
        self.written: list[bytes] = []
        self.flushes: int = 0
        self.fail_with: Exception | None = None
        self.short_by: int = 0

    # -- pyserial interface -------------------------------------------------

    def write(self, data: bytes) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self.written.append(bytes(data))
        return len(data) - self.short_by

    def flush(self) -> None:
        self.flushes += 1

    def close(self) -> None:
        self.is_open = False


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def fake_serial() -> FakeSerial:
    """Return a fresh ``FakeSerial`` instance."""
    return FakeSerial()


@pytest.fixture()
def transport(fake_serial: FakeSerial) -> SerialTransport:
    """Return an open ``SerialTransport`` wired to a fake serial port."""
    with patch("adalight_strip.transport.serial.Serial", return_value=fake_serial):
        tx = SerialTransport("/dev/fake")
        tx.open()
        return tx


@pytest.fixture()
def controller(fake_serial: FakeSerial) -> LedController:
    """Return an open 5-LED ``LedController`` wired to a fake serial port."""
    with patch("adalight_strip.transport.serial.Serial", return_value=fake_serial):
        strip = LedController.for_port("/dev/fake", led_count=5)
        strip.open()
        return strip


@pytest.fixture()
def memory() -> MemoryTransport:
    """Return an unopened ``MemoryTransport``."""
    return MemoryTransport()
