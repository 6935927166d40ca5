"""Coqui TTS engine.

This module provides a TTS engine that delegates synthesis to the external
Coqui `tts` command-line tool. The engine turns its settings into command-line
flags, runs the command, and retries failed runs.
"""

import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
from scipy.io.wavfile import read as wav_read  # type: ignore[import-untyped]

from .args import (
    ARG_LIST_LANGUAGE_IDXS,
    ARG_LIST_SPEAKER_IDXS,
    ARG_MODEL_NAME,
    ARG_MODEL_PATH,
    build_command,
    to_args,
    to_voice_conversion_args,
)
from .catalog import parse_model_name
from .device import Device, parse_device
from .language import parse_language
from .model import ModelIdentifier, new_model
from .runner import run_command, run_with_retries
from .settings import DEFAULT_MAX_RETRIES, DEFAULT_OUTPUT_DIR, Settings
from .tts import TTS, TTSConfig
from .tts_models import (
    BARK_MULTI_DATASET,
    DEFAULT_TTS_MODEL,
    XTTS_V1_MULTI_DATASET,
    XTTS_V2_MULTI_DATASET,
    YOUR_TTS_MULTI_DATASET,
)

DEFAULT_COMMAND = "tts"


@dataclass
class CoquiTTSConfig(TTSConfig):
    """Configuration for the Coqui TTS engine.

    Args:
        model: Full Coqui model name (default: XTTS v2)
        model_path: Path to a local model file, overrides model (default: None)
        language: Synthesis language (default: None, the model's default language)
        vocoder: Full Coqui vocoder name (default: None)
        vocoder_language: Vocoder language (default: None, the vocoder's default)
        voice_conversion: Full Coqui voice conversion model name (default: None)
        speaker: Speaker sample path or speaker index, decided by the model (default: None)
        speaker_wav: Speaker sample path for voice cloning (default: None)
        speaker_idx: Speaker index for multi-speaker models (default: None)
        output_dir: Directory for generated audio files (default: "./dist/")
        device: Compute device: auto, cpu, cuda or mps (default: "auto")
        max_retries: Maximum synthesis attempts (default: 3)
        command: The tts executable to run (default: "tts")
        extra_args: Additional command-line arguments to pass (default: [])
        verbose: Enable verbose output (default: False)
    """

    model: str = DEFAULT_TTS_MODEL.name()
    model_path: str | None = None
    language: str | None = None
    vocoder: str | None = None
    vocoder_language: str | None = None
    voice_conversion: str | None = None
    speaker: str | None = None
    speaker_wav: str | None = None
    speaker_idx: str | None = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    device: str = Device.AUTO.value
    max_retries: int = DEFAULT_MAX_RETRIES
    command: str = DEFAULT_COMMAND
    extra_args: list[str] = field(default_factory=list)
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.command:
            raise ValueError("command must be specified")
        if not self.model:
            raise ValueError("model must be specified")
        if not self.output_dir:
            raise ValueError("output_dir cannot be empty")
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")

        self.device = parse_device(self.device).value
        if self.language:
            self.language = parse_language(self.language)
        if self.vocoder_language:
            self.vocoder_language = parse_language(self.vocoder_language)


class CoquiTTS(TTS):
    """TTS engine that runs the Coqui `tts` command.

    This engine:
    - Keeps validated settings (model, vocoder, speaker, device, retries)
    - Translates them into `tts` command-line flags
    - Runs the command, retrying failed runs up to max_retries
    - Refuses to overwrite existing output files

    Example:
        >>> tts = CoquiTTS.with_xtts_v2(speaker="voice.wav", device="cpu")
        >>> tts.synthesize_to_file("Hello world", "hello.wav")
    """

    # Option name -> Settings setter, used by configure()
    _OPTION_SETTERS: dict[str, str] = {
        "model": "set_model",
        "model_path": "set_model_path",
        "language": "set_language",
        "vocoder": "set_vocoder",
        "vocoder_language": "set_vocoder_language",
        "voice_conversion": "set_voice_conversion",
        "speaker": "set_speaker",
        "speaker_wav": "set_speaker_sample",
        "speaker_idx": "set_speaker_index",
        "output_dir": "set_output_dir",
        "device": "set_device",
        "max_retries": "set_max_retries",
    }

    def __init__(self, config: CoquiTTSConfig | None = None):
        """Initialize the engine.

        Args:
            config: Engine configuration (default: CoquiTTSConfig())

        Raises:
            ValueError: If the configuration contains invalid values
        """
        super().__init__(config or CoquiTTSConfig())
        self.config: CoquiTTSConfig  # Type hint for IDE support
        self.settings = Settings.from_config(self.config)

    @classmethod
    def from_config(cls, config: CoquiTTSConfig, **options: Any) -> "CoquiTTS":
        """Create an engine from a configuration; options override it."""
        return cls(config).configure(**options)

    @classmethod
    def from_model(
        cls,
        model: ModelIdentifier,
        config: CoquiTTSConfig | None = None,
        **options: Any,
    ) -> "CoquiTTS":
        """Create an engine using a preset model."""
        tts = cls(config)
        tts.settings.set_model(model)
        return tts.configure(**options)

    @classmethod
    def from_custom_model(
        cls,
        model: ModelIdentifier,
        config: CoquiTTSConfig | None = None,
        **options: Any,
    ) -> "CoquiTTS":
        """Create an engine using a model that is not in the preset catalog.

        Raises:
            ValueError: If the model's name parts are empty or unknown
        """
        custom = new_model(
            model.category, model.architecture, model.dataset, model.default_language
        )
        return cls.from_model(custom, config, **options)

    @classmethod
    def with_xtts_v2(cls, **options: Any) -> "CoquiTTS":
        """Create an engine using XTTS v2."""
        return cls.from_model(XTTS_V2_MULTI_DATASET, **options)

    @classmethod
    def with_xtts_v1(cls, **options: Any) -> "CoquiTTS":
        """Create an engine using XTTS v1.1."""
        return cls.from_model(XTTS_V1_MULTI_DATASET, **options)

    @classmethod
    def with_your_tts(cls, **options: Any) -> "CoquiTTS":
        """Create an engine using YourTTS."""
        return cls.from_model(YOUR_TTS_MULTI_DATASET, **options)

    @classmethod
    def with_bark(cls, **options: Any) -> "CoquiTTS":
        """Create an engine using Bark."""
        return cls.from_model(BARK_MULTI_DATASET, **options)

    def configure(self, **options: Any) -> "CoquiTTS":
        """Apply named options through the validated setters.

        Model, vocoder and voice conversion options accept either an
        identifier or a full Coqui model name. Options are applied in the
        order given.

        Raises:
            ValueError: If an option is unknown or its value is invalid
        """
        for name, value in options.items():
            setter = self._OPTION_SETTERS.get(name)
            if setter is None:
                supported = ", ".join(sorted(self._OPTION_SETTERS))
                raise ValueError(f"Unknown option '{name}'. Supported: {supported}")

            if name in ("model", "vocoder", "voice_conversion") and isinstance(
                value, str
            ):
                value = parse_model_name(value)
            getattr(self.settings, setter)(value)
        return self

    def to_args(self) -> list[str]:
        """Command-line arguments for the current settings."""
        return to_args(self.settings, verbose=self.config.verbose)

    def resolve_output_path(self, output_path: str | Path) -> Path:
        """Place an output path inside the output directory.

        Absolute paths are kept as they are.
        """
        return Path(self.settings.output_dir) / output_path

    def command_line(self, text: str, output_path: str | Path) -> list[str]:
        """Full command line that synthesizes text into output_path."""
        return build_command(
            self.config.command,
            self.to_args(),
            self.resolve_output_path(output_path),
            text=text,
            extra_args=self.config.extra_args,
        )

    def _prepare_output(self, output_path: str | Path) -> Path:
        path = self.resolve_output_path(output_path)
        if path.exists():
            raise FileExistsError(f"Audio file already exists: {path}")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create output directory {path.parent}: {e}") from e
        return path

    def synthesize_to_file(
        self,
        text: str,
        output_path: str | Path,
        cancel_event: threading.Event | None = None,
    ) -> str:
        """Synthesize speech from text into a file inside the output directory.

        Args:
            text: The input text to convert to speech
            output_path: Output file, relative to the output directory
            cancel_event: When set, the running command is terminated and no
                further attempts are made

        Returns:
            Combined output of the successful tts run

        Raises:
            ValueError: If text is empty
            FileExistsError: If the output file already exists
            CommandFailedError: If every attempt fails
            SynthesisCancelled: If cancel_event was set
        """
        if not text.strip():
            raise ValueError("Text cannot be empty")

        path = self._prepare_output(output_path)
        cmd = build_command(
            self.config.command,
            self.to_args(),
            path,
            text=text,
            extra_args=self.config.extra_args,
        )

        if self.config.verbose:
            print(f"Processing text: {text!r}")
            print(f"  Output: {path}")

        return run_with_retries(
            cmd,
            self.settings.max_retries,
            cancel_event=cancel_event,
            verbose=self.config.verbose,
        )

    def synthesize_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        cancel_event: threading.Event | None = None,
    ) -> str:
        """Synthesize speech from the contents of a text file.

        Raises:
            ValueError: If input_path is empty or the file has no text
            OSError: If the file cannot be read
        """
        if not input_path:
            raise ValueError("file path cannot be empty")

        text = Path(input_path).read_text(encoding="utf-8")
        return self.synthesize_to_file(text, output_path, cancel_event)

    def convert_voice(
        self,
        source_wav: str | Path,
        target_wav: str | Path,
        output_path: str | Path,
        cancel_event: threading.Event | None = None,
    ) -> str:
        """Convert source_wav into the voice of target_wav.

        Uses the configured voice conversion model.

        Raises:
            ValueError: If no voice conversion model is set or a path is empty
            FileExistsError: If the output file already exists
            CommandFailedError: If every attempt fails
        """
        if not source_wav or not target_wav:
            raise ValueError("source and target audio files must be specified")

        args = to_voice_conversion_args(
            self.settings, source_wav, target_wav, verbose=self.config.verbose
        )
        path = self._prepare_output(output_path)
        cmd = build_command(
            self.config.command, args, path, extra_args=self.config.extra_args
        )
        return run_with_retries(
            cmd,
            self.settings.max_retries,
            cancel_event=cancel_event,
            verbose=self.config.verbose,
        )

    def _query(self, flag: str) -> str:
        if self.settings.model_path:
            model_args = [ARG_MODEL_PATH, self.settings.model_path]
        else:
            model_args = [ARG_MODEL_NAME, self.settings.model_name()]
        return run_command([self.config.command, *model_args, flag])

    def list_speaker_idxs(self) -> str:
        """Ask the tts command for the speaker IDs of the current model."""
        return self._query(ARG_LIST_SPEAKER_IDXS)

    def list_language_idxs(self) -> str:
        """Ask the tts command for the language IDs of the current model."""
        return self._query(ARG_LIST_LANGUAGE_IDXS)

    def synthesize(self, text: str) -> tuple[int, np.ndarray]:
        """Synthesize speech from text into memory.

        The tts command writes into a temporary directory and the WAV file is
        read back.

        Args:
            text: The input text to convert to speech

        Returns:
            Tuple of (sample_rate, audio_data) where:
            - sample_rate: Sample rate in Hz
            - audio_data: NumPy array of audio samples as float32

        Raises:
            RuntimeError: If the command fails or produces invalid output
            ValueError: If text is empty
        """
        if not text.strip():
            raise ValueError("Text cannot be empty")

        with tempfile.TemporaryDirectory() as tmpdir:
            output_file = Path(tmpdir) / "output.wav"
            cmd = build_command(
                self.config.command,
                self.to_args(),
                output_file,
                text=text,
                extra_args=self.config.extra_args,
            )
            run_with_retries(
                cmd, self.settings.max_retries, verbose=self.config.verbose
            )

            if not output_file.exists():
                raise RuntimeError(
                    f"TTS command did not create output file: {output_file}"
                )

            try:
                sample_rate, audio_data = wav_read(str(output_file))
            except Exception as e:
                raise RuntimeError(
                    f"Failed to read WAV file from {output_file}: {e}"
                ) from e

        if audio_data.dtype == np.int16:
            audio_data = audio_data.astype(np.float32) / 32768.0
        elif audio_data.dtype == np.int32:
            audio_data = audio_data.astype(np.float32) / 2147483648.0

        return sample_rate, audio_data.astype(np.float32)

    def __repr__(self) -> str:
        """String representation of the TTS engine."""
        return (
            f"CoquiTTS(model={self.settings.model_name()!r}, "
            f"device={self.settings.device.value!r})"
        )
