"""
Coqui Helper - configuration and command construction for the Coqui `tts` tool.

This package provides a catalog of Coqui model presets, validated synthesis
settings, translation of those settings into `tts` command-line flags, and a
runner that executes the command with retries.
"""

from .args import build_command, to_args, to_voice_conversion_args
from .catalog import get_models, list_model_names, parse_model_name
from .coqui_tts import CoquiTTS, CoquiTTSConfig
from .device import Device, detect_device, parse_device, resolve_device
from .language import get_supported_languages, parse_language
from .model import ModelIdentifier, ModelList, new_model
from .runner import (
    CommandFailedError,
    SynthesisCancelled,
    run_command,
    run_with_retries,
)
from .settings import Settings
from .tts import TTS, TTSConfig
from .tts_models import get_tts_models, new_tts_model
from .vocoder_models import get_vocoders, new_vocoder
from .voice_conversion_models import (
    get_voice_conversion_models,
    new_voice_conversion_model,
)

__version__ = "0.1.0"

__all__ = [
    # Base classes
    "TTS",
    "TTSConfig",
    # Coqui engine
    "CoquiTTS",
    "CoquiTTSConfig",
    "Settings",
    # Models
    "ModelIdentifier",
    "ModelList",
    "new_model",
    "get_models",
    "list_model_names",
    "parse_model_name",
    "get_tts_models",
    "new_tts_model",
    "get_vocoders",
    "new_vocoder",
    "get_voice_conversion_models",
    "new_voice_conversion_model",
    # Languages and devices
    "parse_language",
    "get_supported_languages",
    "Device",
    "parse_device",
    "detect_device",
    "resolve_device",
    # Command construction and execution
    "to_args",
    "to_voice_conversion_args",
    "build_command",
    "run_command",
    "run_with_retries",
    "CommandFailedError",
    "SynthesisCancelled",
]
