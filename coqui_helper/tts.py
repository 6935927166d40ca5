"""
Base classes for text-to-speech engines.

This module defines the JSON-serializable configuration base class and the
abstract engine interface implemented by the Coqui command engine.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, TypeVar

import numpy as np
from scipy.io.wavfile import write as wav_write  # type: ignore[import-untyped]

T = TypeVar("T", bound="TTSConfig")


@dataclass
class TTSConfig:
    """
    Base configuration class for TTS engines.

    Provides dictionary and JSON serialization for engine configurations.
    """

    @classmethod
    def from_dict(cls: type[T], config_dict: dict[str, Any]) -> T:
        """
        Create a configuration instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration parameters.

        Returns:
            Configuration instance.

        Raises:
            ValueError: If the dictionary contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ValueError(
                f"Unknown {cls.__name__} option(s): {', '.join(unknown)}"
            )
        return cls(**config_dict)

    @classmethod
    def from_json(cls: type[T], json_path: str | Path) -> T:
        """
        Load configuration from a JSON file.

        Args:
            json_path: Path to the JSON configuration file.

        Returns:
            Configuration instance.

        Raises:
            FileNotFoundError: If the JSON file doesn't exist.
            json.JSONDecodeError: If the JSON file is invalid.
        """
        path = Path(json_path)
        with path.open("r", encoding="utf-8") as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_json(self, json_path: str | Path, indent: int = 2) -> None:
        """
        Save configuration to a JSON file.

        Args:
            json_path: Path where the JSON file should be saved.
            indent: Number of spaces for JSON indentation (default: 2).
        """
        path = Path(json_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=indent)


class TTS(ABC):
    """
    Abstract base class for text-to-speech engines.

    An engine converts text to audio, either directly into a file or into
    an in-memory array.
    """

    def __init__(self, config: TTSConfig):
        """
        Initialize the TTS engine with a configuration.

        Args:
            config: Configuration object for this TTS engine.
        """
        self.config = config

    @abstractmethod
    def synthesize_to_file(self, text: str, output_path: str | Path) -> str:
        """
        Synthesize speech from text into an audio file.

        Args:
            text: The input text to convert to speech.
            output_path: Where the audio file should be written.

        Returns:
            Output reported by the engine.
        """
        pass

    @abstractmethod
    def synthesize(self, text: str) -> tuple[int, np.ndarray]:
        """
        Synthesize speech from text.

        Args:
            text: The input text to convert to speech.

        Returns:
            Tuple of (sample_rate, audio_data) where:
            - sample_rate: Sample rate in Hz (e.g., 22050)
            - audio_data: float32 NumPy array of audio samples
        """
        pass

    def save_audio(
        self, audio_data: np.ndarray, sample_rate: int, output_path: str | Path
    ) -> None:
        """
        Save audio data to a 16-bit WAV file.

        Args:
            audio_data: NumPy array of audio samples (float in [-1, 1] or int16).
            sample_rate: Sample rate in Hz.
            output_path: Path where the audio file should be saved.

        Raises:
            OSError: If saving fails.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if audio_data.dtype in [np.float32, np.float64]:
            audio_data = np.clip(audio_data, -1.0, 1.0)
            audio_data = (audio_data * 32767).astype(np.int16)

        try:
            wav_write(str(output_path), sample_rate, audio_data)
        except Exception as e:
            raise OSError(f"Failed to save audio to {output_path}: {e}") from e

    @abstractmethod
    def __repr__(self) -> str:
        """String representation of the TTS engine."""
        pass
