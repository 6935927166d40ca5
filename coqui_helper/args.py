"""Translate settings into command-line arguments for the Coqui tts command.

The flag spellings below belong to the external tool and must not change.
"""

from pathlib import Path

from .device import Device, resolve_device
from .settings import Settings

# Text to generate speech from
ARG_TEXT = "--text"
# Pre-trained model name: <model_type>/<language>/<dataset>/<model_name>
ARG_MODEL_NAME = "--model_name"
# Pre-trained vocoder name: <model_type>/<language>/<dataset>/<model_name>
ARG_VOCODER_NAME = "--vocoder_name"
# Path to a model config file
ARG_CONFIG_PATH = "--config_path"
# Path to a local model file
ARG_MODEL_PATH = "--model_path"
# Output wav file path
ARG_OUT_PATH = "--out_path"
# Run the model on CUDA
ARG_USE_CUDA = "--use_cuda"
# Device to run the model on
ARG_DEVICE = "--device"
# Path to a local vocoder model file
ARG_VOCODER_PATH = "--vocoder_path"
# Path to a local vocoder config file
ARG_VOCODER_CONFIG_PATH = "--vocoder_config_path"
# Write the generated wav to stdout
ARG_PIPE_OUT = "--pipe_out"
# Target speaker ID for multi-speaker models
ARG_SPEAKER_IDX = "--speaker_idx"
# Target language ID for multi-lingual models
ARG_LANGUAGE_IDX = "--language_idx"
# Speaker sample wav file(s) for voice cloning
ARG_SPEAKER_WAV = "--speaker_wav"
# List the speaker IDs of a multi-speaker model
ARG_LIST_SPEAKER_IDXS = "--list_speaker_idxs"
# List the language IDs of a multi-lingual model
ARG_LIST_LANGUAGE_IDXS = "--list_language_idxs"
# Original audio converted into the voice of target_wav
ARG_SOURCE_WAV = "--source_wav"
# Audio file(s) of the target voice
ARG_TARGET_WAV = "--target_wav"
# Show/hide the model download progress bar
ARG_PROGRESS_BAR = "--progress_bar"
ARG_NO_PROGRESS_BAR = "--no-progress_bar"


def _device_args(settings: Settings, verbose: bool) -> tuple[list[str], Device]:
    device = resolve_device(settings.device, verbose=verbose)
    return [ARG_DEVICE, device.value], device


def _speaker_args(settings: Settings) -> list[str]:
    model = settings.model
    args: list[str] = []

    # A local model file is always treated as a custom model
    if model.is_custom or settings.model_path:
        # A speaker sample takes precedence over an index
        if settings.speaker_sample:
            args += [ARG_SPEAKER_WAV, settings.speaker_sample]
            args += [ARG_LANGUAGE_IDX, model.current_language]
        elif settings.speaker_idx:
            args += [ARG_SPEAKER_IDX, settings.speaker_idx]
        return args

    if model.supports_voice_cloning():
        if settings.speaker_sample:
            args += [ARG_SPEAKER_WAV, settings.speaker_sample]
        args += [ARG_LANGUAGE_IDX, model.current_language]

    if settings.speaker_idx:
        args += [ARG_SPEAKER_IDX, settings.speaker_idx]
    return args


def to_args(settings: Settings, verbose: bool = False) -> list[str]:
    """Build the tts arguments for the given settings.

    Order: device, model path or name, CUDA flag, vocoder, speaker options.
    An AUTO device is resolved here and never stored back in the settings.

    Args:
        settings: Synthesis settings
        verbose: Print device detection details

    Returns:
        Flat list of flag/value pairs
    """
    args, device = _device_args(settings, verbose)

    if settings.model_path:
        args += [ARG_MODEL_PATH, settings.model_path]
    else:
        args += [ARG_MODEL_NAME, settings.model_name()]

    if device is Device.CUDA:
        args += [ARG_USE_CUDA, "true"]

    if settings.vocoder is not None and settings.vocoder.is_valid():
        args += [ARG_VOCODER_NAME, settings.vocoder_name()]

    args += _speaker_args(settings)
    return args


def to_voice_conversion_args(
    settings: Settings,
    source_wav: str | Path,
    target_wav: str | Path,
    verbose: bool = False,
) -> list[str]:
    """Build the tts arguments for converting source_wav into the voice of target_wav.

    Raises:
        ValueError: If no voice conversion model is configured
    """
    if settings.voice_conversion is None:
        raise ValueError("no voice conversion model configured")

    args, device = _device_args(settings, verbose)
    args += [ARG_MODEL_NAME, settings.voice_conversion.name()]
    if device is Device.CUDA:
        args += [ARG_USE_CUDA, "true"]
    args += [ARG_SOURCE_WAV, str(source_wav), ARG_TARGET_WAV, str(target_wav)]
    return args


def build_command(
    command: str,
    args: list[str],
    out_path: str | Path,
    text: str | None = None,
    extra_args: list[str] | None = None,
) -> list[str]:
    """Assemble the full command line: command, arguments, text, output path, extras."""
    cmd = [command, *args]
    if text is not None:
        cmd += [ARG_TEXT, text]
    cmd += [ARG_OUT_PATH, str(out_path)]
    cmd.extend(extra_args or [])
    return cmd
