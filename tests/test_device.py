"""Tests for compute device selection."""

from unittest.mock import patch

import pytest

from coqui_helper.device import (
    Device,
    detect_device,
    is_apple_silicon,
    parse_device,
    resolve_device,
)


class TestParseDevice:
    """Tests for parse_device."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("auto", Device.AUTO),
            ("cpu", Device.CPU),
            ("CUDA", Device.CUDA),
            (" mps ", Device.MPS),
            (Device.CPU, Device.CPU),
        ],
    )
    def test_valid(self, value: str, expected: Device) -> None:
        """Test known devices."""
        assert parse_device(value) is expected

    def test_invalid(self) -> None:
        """Test unknown devices."""
        with pytest.raises(ValueError, match="invalid device specified: 'tpu'"):
            parse_device("tpu")

    def test_str(self) -> None:
        """Test devices print as their flag value."""
        assert str(Device.CUDA) == "cuda"
        assert Device.MPS == "mps"


class TestDetectDevice:
    """Tests for device auto-detection."""

    @patch("coqui_helper.device.platform.machine", return_value="x86_64")
    @patch("coqui_helper.device.platform.system", return_value="Linux")
    @patch("coqui_helper.device.shutil.which", return_value="/usr/bin/nvidia-smi")
    def test_cuda(self, *_mocks: object) -> None:
        """Test nvidia-smi on PATH selects CUDA."""
        assert detect_device() is Device.CUDA

    @patch("coqui_helper.device.platform.machine", return_value="arm64")
    @patch("coqui_helper.device.platform.system", return_value="Darwin")
    @patch("coqui_helper.device.shutil.which", return_value=None)
    def test_apple_silicon(self, *_mocks: object) -> None:
        """Test macOS on ARM64 selects MPS."""
        assert is_apple_silicon()
        assert detect_device() is Device.MPS

    @patch("coqui_helper.device.platform.machine", return_value="x86_64")
    @patch("coqui_helper.device.platform.system", return_value="Darwin")
    @patch("coqui_helper.device.shutil.which", return_value=None)
    def test_intel_mac(self, *_mocks: object) -> None:
        """Test macOS on Intel falls back to CPU."""
        assert not is_apple_silicon()
        assert detect_device() is Device.CPU

    @patch("coqui_helper.device.platform.machine", return_value="x86_64")
    @patch("coqui_helper.device.platform.system", return_value="Linux")
    @patch("coqui_helper.device.shutil.which", return_value=None)
    def test_cpu(self, *_mocks: object) -> None:
        """Test CPU when no GPU is found."""
        assert detect_device() is Device.CPU

    @patch("coqui_helper.device.shutil.which", return_value="/usr/bin/nvidia-smi")
    def test_verbose(self, _which: object, capsys: pytest.CaptureFixture[str]) -> None:
        """Test verbose detection reports the choice."""
        detect_device(verbose=True)

        assert "CUDA" in capsys.readouterr().out


class TestResolveDevice:
    """Tests for resolve_device."""

    def test_concrete_device_unchanged(self) -> None:
        """Test explicit devices are not detected."""
        with patch("coqui_helper.device.detect_device") as mock_detect:
            assert resolve_device(Device.MPS) is Device.MPS
            mock_detect.assert_not_called()

    @patch("coqui_helper.device.detect_device", return_value=Device.CPU)
    def test_auto(self, mock_detect: object) -> None:
        """Test AUTO is detected."""
        assert resolve_device(Device.AUTO) is Device.CPU
