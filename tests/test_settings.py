"""Tests for synthesis settings."""

import tempfile
from pathlib import Path

import pytest

from coqui_helper import tts_models, vocoder_models, voice_conversion_models
from coqui_helper.coqui_tts import CoquiTTSConfig
from coqui_helper.device import Device
from coqui_helper.model import ModelIdentifier
from coqui_helper.settings import DEFAULT_MAX_RETRIES, DEFAULT_OUTPUT_DIR, Settings


class TestSettingsDefaults:
    """Tests for default settings."""

    def test_defaults(self) -> None:
        """Test the default model, device and retries."""
        settings = Settings()

        assert settings.model is tts_models.XTTS_V2_MULTI_DATASET
        assert settings.model_path is None
        assert settings.vocoder is None
        assert settings.device is Device.AUTO
        assert settings.output_dir == DEFAULT_OUTPUT_DIR == "./dist/"
        assert settings.max_retries == DEFAULT_MAX_RETRIES == 3
        assert settings.language == "en"
        assert settings.vocoder_name() is None

    def test_chaining(self) -> None:
        """Test setters return the settings."""
        settings = (
            Settings()
            .set_model(tts_models.VITS_VCTK)
            .set_speaker_index("p225")
            .set_device("cpu")
            .set_max_retries(5)
        )

        assert settings.model_name() == "tts_models/en/vctk/vits"
        assert settings.speaker_idx == "p225"
        assert settings.device is Device.CPU
        assert settings.max_retries == 5


class TestModelSetters:
    """Tests for model, language and vocoder setters."""

    def test_set_model_rejects_other_category(self) -> None:
        """Test a vocoder cannot be used as the TTS model."""
        with pytest.raises(ValueError, match="not a TTS model"):
            Settings().set_model(vocoder_models.HIFIGAN_V2_VCTK)

    def test_set_model_rejects_invalid(self) -> None:
        """Test invalid identifiers are rejected with the reason."""
        broken = ModelIdentifier(
            "tts_models", "vctk", "", "en", supported_languages=["en"]
        )

        with pytest.raises(ValueError, match="invalid TTS model specified"):
            Settings().set_model(broken)

    def test_set_model_path(self) -> None:
        """Test a local model file marks the model as custom."""
        with tempfile.TemporaryDirectory() as tmpdir:
            model_file = Path(tmpdir) / "model.pth"
            model_file.write_bytes(b"")

            settings = Settings().set_model_path(model_file)

            assert settings.model_path == str(model_file)
            assert settings.model.is_custom

            # Choosing a model again drops the path
            settings.set_model(tts_models.VITS_LJSPEECH)
            assert settings.model_path is None

    def test_set_model_path_missing(self) -> None:
        """Test a missing model file."""
        with pytest.raises(ValueError, match="model path does not exist"):
            Settings().set_model_path("/nonexistent/model.pth")

    def test_set_language(self) -> None:
        """Test language selection on the current model."""
        settings = Settings().set_language("German")

        assert settings.language == "de"
        assert settings.model.default_language == "en"

    def test_set_language_unsupported(self) -> None:
        """Test a language the model does not speak."""
        settings = Settings().set_model(tts_models.VITS_THORSTEN)

        with pytest.raises(ValueError, match="does not support language"):
            settings.set_language("fr")
        with pytest.raises(ValueError, match="Unsupported language"):
            settings.set_language("xx")

    def test_set_vocoder(self) -> None:
        """Test vocoder selection."""
        settings = Settings().set_vocoder(vocoder_models.HIFIGAN_V2_VCTK)

        assert settings.vocoder_name() == "vocoder_models/en/vctk/hifigan_v2"

        with pytest.raises(ValueError, match="not a vocoder model"):
            settings.set_vocoder(tts_models.VITS_VCTK)

    def test_set_vocoder_language(self) -> None:
        """Test vocoder language requires a vocoder."""
        with pytest.raises(ValueError, match="no vocoder configured"):
            Settings().set_vocoder_language("en")

        settings = Settings().set_vocoder(vocoder_models.WAVEGRAD_LIBRI_TTS)
        settings.set_vocoder_language("de")
        assert settings.vocoder.current_language == "de"
        assert settings.vocoder_name() == "vocoder_models/universal/libri-tts/wavegrad"

    def test_set_vocoder_language_single_language(self) -> None:
        """Test a per-language vocoder keeps its own language in the name."""
        settings = Settings().set_vocoder(vocoder_models.WAVEGRAD_THORSTEN)

        assert settings.vocoder_name() == "vocoder_models/de/thorsten/wavegrad"
        with pytest.raises(ValueError, match="does not support language"):
            settings.set_vocoder_language("en")

    def test_set_voice_conversion(self) -> None:
        """Test voice conversion model selection."""
        settings = Settings().set_voice_conversion(
            voice_conversion_models.FREEVC24_VCTK
        )
        assert settings.voice_conversion is voice_conversion_models.FREEVC24_VCTK

        with pytest.raises(ValueError, match="not a voice conversion model"):
            settings.set_voice_conversion(tts_models.VITS_VCTK)


class TestSpeakerSetters:
    """Tests for speaker selection."""

    def test_set_speaker_sample_for_cloning_model(self) -> None:
        """Test a file name on a cloning model is a speaker sample."""
        settings = Settings().set_speaker("voice.wav")

        assert settings.speaker_sample == "voice.wav"
        assert settings.speaker_idx is None

    def test_set_speaker_index(self) -> None:
        """Test a plain value is a speaker index."""
        settings = Settings().set_speaker("p225")

        assert settings.speaker_idx == "p225"
        assert settings.speaker_sample is None

    def test_set_speaker_file_without_cloning(self) -> None:
        """Test a file name on a model without cloning is treated as an index."""
        settings = Settings().set_model(tts_models.VITS_VCTK).set_speaker("voice.wav")

        assert settings.speaker_idx == "voice.wav"
        assert settings.speaker_sample is None

    def test_empty_values(self) -> None:
        """Test empty speaker values are rejected."""
        with pytest.raises(ValueError, match="speaker cannot be empty"):
            Settings().set_speaker("")
        with pytest.raises(ValueError, match="speaker sample path cannot be empty"):
            Settings().set_speaker_sample("")
        with pytest.raises(ValueError, match="speaker index cannot be empty"):
            Settings().set_speaker_index("")


class TestRuntimeSetters:
    """Tests for output, device and retry setters."""

    def test_set_output_dir(self) -> None:
        """Test output directory."""
        assert Settings().set_output_dir("audio").output_dir == "audio"

        with pytest.raises(ValueError, match="output directory cannot be empty"):
            Settings().set_output_dir("")

    def test_set_device(self) -> None:
        """Test device parsing."""
        assert Settings().set_device("MPS").device is Device.MPS

        with pytest.raises(ValueError, match="invalid device specified"):
            Settings().set_device("gpu")

    def test_set_max_retries(self) -> None:
        """Test at least one attempt is required."""
        assert Settings().set_max_retries(1).max_retries == 1

        with pytest.raises(ValueError, match="max_retries must be at least 1, got 0"):
            Settings().set_max_retries(0)


class TestFromConfig:
    """Tests for building settings from a configuration."""

    def test_from_config(self) -> None:
        """Test every configured value is applied."""
        config = CoquiTTSConfig(
            model="tts_models/cs/cv/vits",
            language="cs",
            vocoder="vocoder_models/universal/libri-tts/fullband-melgan",
            vocoder_language="en",
            speaker_idx="speaker_1",
            output_dir="out",
            device="cpu",
            max_retries=2,
        )

        settings = Settings.from_config(config)

        assert settings.model.architecture == "vits"
        assert not settings.model.is_custom
        assert settings.model_name() == "tts_models/cs/cv/vits"
        assert settings.language == "cs"
        assert settings.vocoder.current_language == "en"
        assert settings.vocoder_name() == (
            "vocoder_models/universal/libri-tts/fullband-melgan"
        )
        assert settings.speaker_idx == "speaker_1"
        assert settings.output_dir == "out"
        assert settings.device is Device.CPU
        assert settings.max_retries == 2

    def test_from_config_invalid_model(self) -> None:
        """Test invalid model names surface as ValueError."""
        with pytest.raises(ValueError, match="Invalid model name"):
            Settings.from_config(CoquiTTSConfig(model="xtts_v2"))
