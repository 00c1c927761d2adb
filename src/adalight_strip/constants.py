"""Shared runtime constants for the Adalight LED strip driver.

This is the canonical source of truth for wire-format limits and controller
defaults.  Other modules should import from here rather than defining
their own copies.
"""

# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------

MAGIC = b"Ada"
HEADER_SIZE = 6
BYTES_PER_LED = 3
MAX_HEADER_COUNT = 255  # single count byte; offsets 3-4 stay zero

# ---------------------------------------------------------------------------
# Controller / runtime defaults
# ---------------------------------------------------------------------------

DEFAULT_PORT = "/dev/ttyUSB0"
DEFAULT_BAUD = 115200
DEFAULT_TIMEOUT = 1.0
