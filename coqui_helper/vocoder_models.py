"""Preset catalog of Coqui vocoder models.

Vocoders convert mel-spectrograms to audio waveforms. Universal vocoders
(trained on LibriTTS) work with any language and use "universal" in their name.
"""

from . import dataset as ds
from . import language as lang
from .dataset import CATEGORY_VOCODER
from .model import ModelIdentifier, ModelList, new_model

# Vocoder architectures
WAVEGRAD = "wavegrad"
FULLBAND_MELGAN = "fullband-melgan"
MULTIBAND_MELGAN = "multiband-melgan"
HIFIGAN_V1 = "hifigan_v1"
HIFIGAN_V2 = "hifigan_v2"
HIFIGAN = "hifigan"
UNIVNET = "univnet"
PARALLEL_WAVEGAN = "parallel-wavegan"


def _preset(dataset: str, architecture: str, language: str) -> ModelIdentifier:
    if language == lang.UNIVERSAL:
        supported = tuple(lang.get_supported_languages())
    else:
        supported = (language,)
    return ModelIdentifier(
        category=CATEGORY_VOCODER,
        dataset=dataset,
        architecture=architecture,
        default_language=language,
        supported_languages=supported,
    )


# Wavegrad
WAVEGRAD_LIBRI_TTS = _preset(ds.LIBRI_TTS, WAVEGRAD, lang.UNIVERSAL)
WAVEGRAD_EK1 = _preset(ds.EK1, WAVEGRAD, lang.ENGLISH)
WAVEGRAD_THORSTEN = _preset(ds.THORSTEN, WAVEGRAD, lang.GERMAN)

# Fullband MelGAN
FULLBAND_MELGAN_LIBRI_TTS = _preset(ds.LIBRI_TTS, FULLBAND_MELGAN, lang.UNIVERSAL)
FULLBAND_MELGAN_THORSTEN = _preset(ds.THORSTEN, FULLBAND_MELGAN, lang.GERMAN)

# Multiband MelGAN
MULTIBAND_MELGAN_LJSPEECH = _preset(ds.LJSPEECH, MULTIBAND_MELGAN, lang.ENGLISH)
MULTIBAND_MELGAN_MAI = _preset(ds.MAI, MULTIBAND_MELGAN, lang.UKRAINIAN)

# HiFi-GAN v1
HIFIGAN_V1_THORSTEN = _preset(ds.THORSTEN, HIFIGAN_V1, lang.GERMAN)
HIFIGAN_V1_KOKORO = _preset(ds.KOKORO, HIFIGAN_V1, lang.JAPANESE)

# HiFi-GAN v2
HIFIGAN_V2_LJSPEECH = _preset(ds.LJSPEECH, HIFIGAN_V2, lang.ENGLISH)
HIFIGAN_V2_BLIZZARD2013 = _preset(ds.BLIZZARD2013, HIFIGAN_V2, lang.ENGLISH)
HIFIGAN_V2_VCTK = _preset(ds.VCTK, HIFIGAN_V2, lang.ENGLISH)
HIFIGAN_V2_SAM = _preset(ds.SAM, HIFIGAN_V2, lang.ENGLISH)

# HiFi-GAN
HIFIGAN_COMMON_VOICE_TURKISH = _preset(ds.COMMON_VOICE, HIFIGAN, lang.TURKISH)
HIFIGAN_COMMON_VOICE_BELARUSIAN = _preset(ds.COMMON_VOICE, HIFIGAN, lang.BELARUSIAN)

# UnivNet
UNIVNET_LJSPEECH = _preset(ds.LJSPEECH, UNIVNET, lang.ENGLISH)

# Parallel WaveGAN
PARALLEL_WAVEGAN_MAI = _preset(ds.MAI, PARALLEL_WAVEGAN, lang.DUTCH)

_VOCODERS = ModelList(
    [
        WAVEGRAD_LIBRI_TTS,
        WAVEGRAD_EK1,
        WAVEGRAD_THORSTEN,
        FULLBAND_MELGAN_LIBRI_TTS,
        FULLBAND_MELGAN_THORSTEN,
        MULTIBAND_MELGAN_LJSPEECH,
        MULTIBAND_MELGAN_MAI,
        HIFIGAN_V1_THORSTEN,
        HIFIGAN_V1_KOKORO,
        HIFIGAN_V2_LJSPEECH,
        HIFIGAN_V2_BLIZZARD2013,
        HIFIGAN_V2_VCTK,
        HIFIGAN_V2_SAM,
        HIFIGAN_COMMON_VOICE_TURKISH,
        HIFIGAN_COMMON_VOICE_BELARUSIAN,
        UNIVNET_LJSPEECH,
        PARALLEL_WAVEGAN_MAI,
    ]
)


def vocoder_name(vocoder: ModelIdentifier) -> str:
    """Full Coqui vocoder name: vocoder_models/language/dataset/architecture.

    Unlike TTS model names, the language is never replaced by "multilingual".
    Universal vocoders keep "universal" whatever language is selected.
    """
    if vocoder.default_language == lang.UNIVERSAL:
        language = lang.UNIVERSAL
    else:
        language = vocoder.current_language
    return f"{vocoder.category}/{language}/{vocoder.dataset}/{vocoder.architecture}"


def get_vocoders() -> ModelList:
    """Get every preset vocoder."""
    return _VOCODERS


def new_vocoder(architecture: str, dataset: str, language: str) -> ModelIdentifier:
    """Create a custom vocoder identifier.

    Raises:
        ValueError: If any field is empty or unknown
    """
    return new_model(CATEGORY_VOCODER, architecture, dataset, language)
