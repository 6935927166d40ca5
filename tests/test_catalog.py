"""Tests for model lookup by name."""

import pytest

from coqui_helper import tts_models, vocoder_models, voice_conversion_models
from coqui_helper.catalog import get_models, list_model_names, parse_model_name
from coqui_helper.dataset import get_categories, get_datasets, is_preset_dataset


class TestGetModels:
    """Tests for get_models."""

    def test_all(self) -> None:
        """Test all categories are combined."""
        models = get_models()

        assert tts_models.VITS_VCTK in models
        assert vocoder_models.HIFIGAN_V2_VCTK in models
        assert voice_conversion_models.FREEVC24_VCTK in models

    def test_by_category(self) -> None:
        """Test one category at a time."""
        for category in get_categories():
            assert all(m.category == category for m in get_models(category))

    def test_unknown_category(self) -> None:
        """Test unknown category."""
        with pytest.raises(ValueError, match="Unknown model category"):
            get_models("speech_models")

    def test_list_model_names(self) -> None:
        """Test names use the form the tts command expects."""
        names = list_model_names("vocoder_models")

        assert "vocoder_models/universal/libri-tts/fullband-melgan" in names
        assert "tts_models/multilingual/multi-dataset/xtts_v2" in list_model_names()


class TestParseModelName:
    """Tests for parse_model_name."""

    def test_preset(self) -> None:
        """Test a preset is returned as is."""
        model = parse_model_name("tts_models/multilingual/multi-dataset/xtts_v2")

        assert model is tts_models.XTTS_V2_MULTI_DATASET

    def test_preset_language_name(self) -> None:
        """Test a per-language name selects the language on the preset."""
        model = parse_model_name("tts_models/sk/cv/vits")

        assert model.current_language == "sk"
        assert not model.is_custom
        assert model.architecture == "vits"

    def test_vocoder(self) -> None:
        """Test vocoders are matched by their vocoder name."""
        assert (
            parse_model_name("vocoder_models/universal/libri-tts/wavegrad")
            is vocoder_models.WAVEGRAD_LIBRI_TTS
        )
        assert (
            parse_model_name("vocoder_models/de/thorsten/hifigan_v1")
            is vocoder_models.HIFIGAN_V1_THORSTEN
        )

    def test_vocoder_language_name_is_not_universal_preset(self) -> None:
        """Test a language name never resolves to a universal vocoder."""
        model = parse_model_name("vocoder_models/en/libri-tts/wavegrad")

        assert model is not vocoder_models.WAVEGRAD_LIBRI_TTS
        assert model.is_custom
        assert model.current_language == "en"

    def test_voice_conversion(self) -> None:
        """Test voice conversion lookup."""
        assert (
            parse_model_name("voice_conversion_models/multilingual/multi-dataset/knnvc")
            is voice_conversion_models.KNNVC_MULTI_DATASET
        )

    def test_custom(self) -> None:
        """Test unknown combinations become custom identifiers."""
        model = parse_model_name("tts_models/es/cv/glow-tts")

        assert model.is_custom
        assert model.name() == "tts_models/es/cv/glow-tts"

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "xtts_v2",
            "tts_models/en/ljspeech",
            "tts_models/en/ljspeech/vits/extra",
            "tts_models//ljspeech/vits",
        ],
    )
    def test_malformed(self, name: str) -> None:
        """Test names without exactly four parts."""
        with pytest.raises(ValueError, match="Invalid model name"):
            parse_model_name(name)

    def test_unknown_parts(self) -> None:
        """Test unknown category, language or dataset."""
        with pytest.raises(ValueError, match="Unknown model category"):
            parse_model_name("speech_models/en/ljspeech/vits")
        with pytest.raises(ValueError, match="unsupported language"):
            parse_model_name("tts_models/xx/ljspeech/vits")
        with pytest.raises(ValueError, match="unsupported dataset"):
            parse_model_name("tts_models/en/my-data/vits")


class TestDatasets:
    """Tests for dataset identifiers."""

    def test_known(self) -> None:
        """Test known datasets."""
        assert is_preset_dataset("ljspeech")
        assert is_preset_dataset("mai_female")
        assert not is_preset_dataset("my-data")

    def test_returns_copy(self) -> None:
        """Test callers cannot modify the shared list."""
        get_datasets().clear()
        assert "vctk" in get_datasets()
