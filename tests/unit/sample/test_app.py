"""
Tests for mobilabs.sample.app module.
"""

from unittest.mock import patch

from mobilabs.core.config import Config, PlatformConfig
from mobilabs.core.errors import PlatformError
from mobilabs.platform.host import SimulatedPlatform
from mobilabs.sample.app import build_view_model, describe, main


def simulated_config(**platform_kwargs) -> Config:
    platform_kwargs.setdefault("backend", "simulated")
    return Config(platform=PlatformConfig(**platform_kwargs))


class TestDescribe:
    """Tests for describe()."""

    def test_phone_description(self):
        """Test the summary of a simulated phone."""
        config = simulated_config(
            hardware_identifier="iPhone6,1",
            firmware_version="7.1",
            gyroscope_supported=True,
        )
        with patch("mobilabs.platform.host.psutil.sensors_battery", return_value=None):
            lines = describe(build_view_model(config))

        assert "Device is called iPhone 5s" in lines
        assert "Device was manufactured by Apple" in lines
        assert "Hardware version: iPhone6,1" in lines
        assert "Firmware version: 7.1" in lines
        assert "Gyroscope: yes" in lines
        assert "Phone: yes" in lines
        assert "Battery: unavailable" in lines
        assert any(line.startswith("Id: unavailable") for line in lines)

    def test_simulator_description(self):
        """Test an unknown identifier is described as the simulator."""
        config = simulated_config(hardware_identifier="x86_64", device_id="sim-1")
        lines = describe(build_view_model(config))
        assert "Device is called Simulator" in lines
        assert "Gyroscope: no" in lines
        assert "Phone: no" in lines
        assert "Id: sim-1" in lines


class TestMain:
    """Tests for main()."""

    def test_prints_summary(self, temp_config_file, capsys):
        """Test main prints the device summary."""
        assert main(["-c", str(temp_config_file)]) == 0
        out = capsys.readouterr().out
        assert "Device is called iPhone 5s" in out
        assert "Id: test-device-001" in out

    def test_dial(self, temp_config_file, capsys):
        """Test --dial dials through the simulated platform."""
        with patch.object(SimulatedPlatform, "open_url", return_value=True) as mock_open:
            assert main(["-c", str(temp_config_file), "--dial", "555 0100"]) == 0
        mock_open.assert_called_once_with("tel:5550100")
        assert "Dialed 555 0100" in capsys.readouterr().out

    def test_dial_empty_number(self, temp_config_file, capsys):
        """Test an empty number is refused without dialing."""
        with patch.object(SimulatedPlatform, "open_url") as mock_open:
            assert main(["-c", str(temp_config_file), "--dial", ""]) == 1
        mock_open.assert_not_called()
        assert "Dialing is not available" in capsys.readouterr().out

    def test_dial_failure(self, temp_config_file):
        """Test platform failures exit non-zero."""
        with patch.object(SimulatedPlatform, "open_url", side_effect=PlatformError("open_url")):
            assert main(["-c", str(temp_config_file), "--dial", "555"]) == 1
