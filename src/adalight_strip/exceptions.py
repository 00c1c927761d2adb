"""
Exception hierarchy for the Adalight LED strip driver.

All exceptions inherit from :class:`AdalightError` so callers can catch
broadly (``except AdalightError``) or narrowly (``except NotOpenError``).

Only :class:`ConfigurationError` and :class:`ValidationError` escape the
controller's public API.  The others are reported inside a
:class:`~adalight_strip.controller.WriteResult` (or as ``False`` from
:meth:`~adalight_strip.controller.LedController.open`).
"""


class AdalightError(Exception):
    """Base exception for all Adalight driver errors."""


class ConfigurationError(AdalightError):
    """Raised when the strip is configured with unusable values."""


class ValidationError(AdalightError):
    """Raised when a color or HSV argument fails validation."""


class ConnectionError(AdalightError):  # noqa: A001 – intentional shadow of builtin
    """The byte sink could not be opened (busy, permission, missing device)."""


class NotOpenError(AdalightError):
    """A frame was written while the byte sink was closed."""


class LengthMismatchError(AdalightError):
    """A color sequence did not contain exactly one color per LED."""


class IndexRangeError(AdalightError):
    """An LED index fell outside ``0..led_count-1``."""


class TransportError(AdalightError):
    """The byte sink failed while transmitting a frame."""
