"""Compute device selection for the tts command."""

import platform
import shutil
from enum import Enum


class Device(str, Enum):
    """Compute device passed to the tts command."""

    AUTO = "auto"
    CPU = "cpu"
    CUDA = "cuda"
    MPS = "mps"

    def __str__(self) -> str:
        return self.value


def parse_device(value: "str | Device") -> Device:
    """Parse a device name (case-insensitive).

    Raises:
        ValueError: If the device is not one of auto, cpu, cuda, mps
    """
    if isinstance(value, Device):
        return value
    try:
        return Device(str(value).strip().lower())
    except ValueError:
        supported = ", ".join(d.value for d in Device)
        raise ValueError(
            f"invalid device specified: '{value}'. Supported: {supported}"
        ) from None


def is_cuda_available() -> bool:
    """Check for NVIDIA drivers by looking for nvidia-smi on PATH.

    This does not guarantee CUDA is usable by the tts command.
    """
    return shutil.which("nvidia-smi") is not None


def is_apple_silicon() -> bool:
    """Check whether this is macOS on an ARM64 processor."""
    return platform.system() == "Darwin" and platform.machine().lower() in (
        "arm64",
        "aarch64",
    )


def detect_device(verbose: bool = False) -> Device:
    """Pick the best available device: CUDA, then MPS, then CPU.

    Args:
        verbose: Print which device was picked and why

    Returns:
        A concrete device, never Device.AUTO
    """
    if is_cuda_available():
        if verbose:
            print("CUDA available, using CUDA device.")
        return Device.CUDA

    if is_apple_silicon():
        if verbose:
            print("Apple Silicon detected, using MPS device.")
        return Device.MPS

    if verbose:
        print("No GPU detected, using CPU device.")
    return Device.CPU


def resolve_device(device: Device, verbose: bool = False) -> Device:
    """Resolve AUTO to a concrete device; other devices are returned unchanged."""
    if device is Device.AUTO:
        return detect_device(verbose=verbose)
    return device
