"""
Synthesis settings with validated setters.

Settings hold the model, vocoder, speaker and runtime choices for one TTS
engine. Every setter validates its input and raises ValueError on bad values,
so a Settings object is always consistent. Setters return the settings to
allow chaining:

    >>> settings = Settings().set_device("cpu").set_max_retries(5)
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

from .catalog import parse_model_name
from .dataset import CATEGORY_TTS, CATEGORY_VOCODER, CATEGORY_VOICE_CONVERSION
from .device import Device, parse_device
from .language import parse_language
from .model import ModelIdentifier
from .tts_models import DEFAULT_TTS_MODEL
from .vocoder_models import vocoder_name

if TYPE_CHECKING:
    from .coqui_tts import CoquiTTSConfig

DEFAULT_OUTPUT_DIR = "./dist/"
DEFAULT_MAX_RETRIES = 3


@dataclass
class Settings:
    """Current synthesis settings.

    Attributes:
        model: TTS model used for synthesis
        model_path: Path to a local model file; overrides the model name
        vocoder: Optional vocoder used alongside the model
        voice_conversion: Optional voice conversion model
        speaker_sample: Speaker sample audio file for voice cloning
        speaker_idx: Speaker index for multi-speaker models (e.g., 'p225')
        output_dir: Directory where audio files are written
        device: Compute device; AUTO is resolved when arguments are built
        max_retries: Maximum synthesis attempts
    """

    model: ModelIdentifier = DEFAULT_TTS_MODEL
    model_path: str | None = None
    vocoder: ModelIdentifier | None = None
    voice_conversion: ModelIdentifier | None = None
    speaker_sample: str | None = None
    speaker_idx: str | None = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    device: Device = Device.AUTO
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        """Normalize the device given as a string."""
        self.device = parse_device(self.device)

    @classmethod
    def from_config(cls, config: "CoquiTTSConfig") -> "Settings":
        """Build settings from a configuration, validating every value.

        Args:
            config: Engine configuration

        Returns:
            New Settings instance

        Raises:
            ValueError: If any configured value is invalid
        """
        settings = cls()
        settings.set_model(parse_model_name(config.model))

        if config.model_path:
            settings.set_model_path(config.model_path)
        if config.language:
            settings.set_language(config.language)
        if config.vocoder:
            settings.set_vocoder(parse_model_name(config.vocoder))
            if config.vocoder_language:
                settings.set_vocoder_language(config.vocoder_language)
        if config.voice_conversion:
            settings.set_voice_conversion(parse_model_name(config.voice_conversion))
        if config.speaker:
            settings.set_speaker(config.speaker)
        if config.speaker_wav:
            settings.set_speaker_sample(config.speaker_wav)
        if config.speaker_idx:
            settings.set_speaker_index(config.speaker_idx)

        settings.set_output_dir(config.output_dir)
        settings.set_device(config.device)
        settings.set_max_retries(config.max_retries)
        return settings

    @property
    def language(self) -> str:
        """Language currently selected on the model."""
        return self.model.current_language

    def model_name(self) -> str:
        """Full Coqui name of the current model."""
        return self.model.name()

    def vocoder_name(self) -> str | None:
        """Full Coqui name of the current vocoder, if one is set."""
        if self.vocoder is None:
            return None
        return vocoder_name(self.vocoder)

    def set_model(self, model: ModelIdentifier) -> "Settings":
        """Use a TTS model. Clears any local model path."""
        try:
            model.validate()
        except ValueError as e:
            raise ValueError(f"invalid TTS model specified: {e}") from e
        if model.category != CATEGORY_TTS:
            raise ValueError(f"not a TTS model: {model.name()}")

        self.model = model
        self.model_path = None
        return self

    def set_model_path(self, path: str | Path) -> "Settings":
        """Use a local model file. The current model is marked as custom."""
        if not str(path):
            raise ValueError("model path cannot be empty")
        if not Path(path).exists():
            raise ValueError(f"model path does not exist: {path}")

        self.model_path = str(path)
        self.model = replace(self.model, is_custom=True)
        return self

    def set_language(self, language: str) -> "Settings":
        """Select the synthesis language on the current model."""
        self.model = self.model.with_language(parse_language(language))
        return self

    def set_vocoder(self, vocoder: ModelIdentifier) -> "Settings":
        """Use a vocoder alongside the model."""
        try:
            vocoder.validate()
        except ValueError as e:
            raise ValueError(f"invalid vocoder specified: {e}") from e
        if vocoder.category != CATEGORY_VOCODER:
            raise ValueError(f"not a vocoder model: {vocoder.name()}")

        self.vocoder = vocoder
        return self

    def set_vocoder_language(self, language: str) -> "Settings":
        """Select the language on the current vocoder."""
        if self.vocoder is None:
            raise ValueError("no vocoder configured")
        self.vocoder = self.vocoder.with_language(parse_language(language))
        return self

    def set_voice_conversion(self, model: ModelIdentifier) -> "Settings":
        """Use a voice conversion model."""
        try:
            model.validate()
        except ValueError as e:
            raise ValueError(f"invalid voice conversion model specified: {e}") from e
        if model.category != CATEGORY_VOICE_CONVERSION:
            raise ValueError(f"not a voice conversion model: {model.name()}")

        self.voice_conversion = model
        return self

    def set_speaker(self, speaker: str) -> "Settings":
        """Set the speaker, deciding between sample file and speaker index.

        A value with a file extension (e.g. 'voice.wav') on a model that
        supports voice cloning is a speaker sample; anything else is an index.
        """
        if not speaker:
            raise ValueError("speaker cannot be empty")

        if Path(speaker).suffix and self.model.supports_voice_cloning():
            self.speaker_sample = speaker
        else:
            self.speaker_idx = speaker
        return self

    def set_speaker_sample(self, sample_path: str | Path) -> "Settings":
        """Set the speaker sample file used for voice cloning."""
        if not str(sample_path):
            raise ValueError("speaker sample path cannot be empty")
        self.speaker_sample = str(sample_path)
        return self

    def set_speaker_index(self, idx: str) -> "Settings":
        """Set the speaker index for multi-speaker models."""
        if not idx:
            raise ValueError("speaker index cannot be empty")
        self.speaker_idx = idx
        return self

    def set_output_dir(self, output_dir: str | Path) -> "Settings":
        """Set the directory audio files are written to."""
        if not str(output_dir):
            raise ValueError("output directory cannot be empty")
        self.output_dir = str(output_dir)
        return self

    def set_device(self, device: "str | Device") -> "Settings":
        """Set the compute device (auto, cpu, cuda or mps)."""
        self.device = parse_device(device)
        return self

    def set_max_retries(self, max_retries: int) -> "Settings":
        """Set the maximum number of synthesis attempts."""
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")
        self.max_retries = max_retries
        return self
