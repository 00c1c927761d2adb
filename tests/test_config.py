"""
Tests for the YAML strip configuration.

Covers:
* Config loading (valid YAML, defaults)
* Validation failures (missing fields, bad values, bad YAML)
* Building a controller from a config
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from adalight_strip import ConfigurationError, LedController
from adalight_strip.config import StripConfig, load_config
from adalight_strip.transport import SerialTransport

# ══════════════════════════════════════════════════════════════════════════
#  Fixtures
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    """Return a temp directory for config files."""
    return tmp_path


def write_config(path: Path, content: str) -> Path:
    """Write a YAML config file and return its path."""
    config_file = path / "strip.yaml"
    config_file.write_text(textwrap.dedent(content))
    return config_file


VALID_CONFIG = """\
    port: /dev/ttyACM0
    led_count: 120
    baud: 230400
    timeout: 0.5
    log_level: debug
"""

MINIMAL_CONFIG = """\
    port: COM3
    led_count: 60
"""


# ══════════════════════════════════════════════════════════════════════════
#  Config loading: valid configs
# ══════════════════════════════════════════════════════════════════════════


class TestLoadConfigValid:
    def test_all_fields(self, config_dir):
        config = load_config(write_config(config_dir, VALID_CONFIG))
        assert config == StripConfig(
            port="/dev/ttyACM0",
            led_count=120,
            baud=230400,
            timeout=0.5,
            log_level="DEBUG",
        )

    def test_defaults(self, config_dir):
        config = load_config(write_config(config_dir, MINIMAL_CONFIG))
        assert config.port == "COM3"
        assert config.baud == 115200
        assert config.timeout == 1.0
        assert config.log_level == "INFO"

    def test_integer_timeout_becomes_float(self, config_dir):
        content = MINIMAL_CONFIG + "    timeout: 2\n"
        config = load_config(write_config(config_dir, content))
        assert config.timeout == 2.0
        assert isinstance(config.timeout, float)

    def test_accepts_str_path(self, config_dir):
        path = write_config(config_dir, MINIMAL_CONFIG)
        assert load_config(str(path)).led_count == 60

    def test_large_led_count_allowed(self, config_dir):
        content = """\
            port: /dev/ttyUSB0
            led_count: 300
        """
        assert load_config(write_config(config_dir, content)).led_count == 300


# ══════════════════════════════════════════════════════════════════════════
#  Config loading: invalid configs
# ══════════════════════════════════════════════════════════════════════════


class TestLoadConfigInvalid:
    def test_file_not_found(self, config_dir):
        with pytest.raises(FileNotFoundError):
            load_config(config_dir / "nonexistent.yaml")

    def test_not_a_mapping(self, config_dir):
        path = write_config(config_dir, "- just\n- a\n- list\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_unparseable_yaml(self, config_dir):
        path = write_config(config_dir, "port: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            load_config(path)

    def test_missing_port(self, config_dir):
        path = write_config(config_dir, "led_count: 10\n")
        with pytest.raises(ConfigurationError, match="port"):
            load_config(path)

    def test_missing_led_count(self, config_dir):
        path = write_config(config_dir, "port: /dev/ttyUSB0\n")
        with pytest.raises(ConfigurationError, match="led_count"):
            load_config(path)

    @pytest.mark.parametrize("value", ["0", "-5", "ten", "true"])
    def test_bad_led_count(self, config_dir, value):
        path = write_config(config_dir, f"port: /dev/ttyUSB0\nled_count: {value}\n")
        with pytest.raises(ConfigurationError, match="led_count"):
            load_config(path)

    def test_bad_baud(self, config_dir):
        content = MINIMAL_CONFIG + "    baud: fast\n"
        with pytest.raises(ConfigurationError, match="baud"):
            load_config(write_config(config_dir, content))

    def test_bad_timeout(self, config_dir):
        content = MINIMAL_CONFIG + "    timeout: -1\n"
        with pytest.raises(ConfigurationError, match="timeout"):
            load_config(write_config(config_dir, content))

    def test_bad_log_level(self, config_dir):
        content = MINIMAL_CONFIG + "    log_level: chatty\n"
        with pytest.raises(ConfigurationError, match="log_level"):
            load_config(write_config(config_dir, content))


# ══════════════════════════════════════════════════════════════════════════
#  Controller creation
# ══════════════════════════════════════════════════════════════════════════


class TestCreateController:
    def test_builds_unopened_serial_controller(self):
        config = StripConfig(port="/dev/fake", led_count=8, baud=9600, timeout=0.25)
        strip = config.create_controller()
        assert isinstance(strip, LedController)
        assert strip.led_count == 8
        assert strip.baud_rate == 9600
        assert not strip.is_open

    def test_transport_settings(self):
        config = StripConfig(port="/dev/fake", led_count=8, baud=9600, timeout=0.25)
        strip = config.create_controller()
        transport = strip._transport  # noqa: SLF001
        assert isinstance(transport, SerialTransport)
        assert (transport.port, transport.baudrate, transport.timeout) == ("/dev/fake", 9600, 0.25)
