"""Preset catalog of the text-to-speech models published by Coqui TTS."""

from . import dataset as ds
from . import language as lang
from .dataset import CATEGORY_TTS
from .model import ModelIdentifier, ModelList, new_model

# Multilingual architectures
XTTS_V2 = "xtts_v2"
XTTS_V1 = "xtts_v1.1"
YOUR_TTS = "your_tts"
BARK = "bark"

# Single language architectures
VITS = "vits"
VITS_NEON = "vits--neon"
VITS_NEON_DASH = "vits-neon"
VITS_MALE = "vits-male"
VITS_FEMALE = "vits-female"

# Tacotron variants
TACOTRON2 = "tacotron2"
TACOTRON2_DDC = "tacotron2-DDC"
TACOTRON2_DDC_PH = "tacotron2-DDC_ph"
TACOTRON2_DCA = "tacotron2-DCA"
TACOTRON2_DDC_GST = "tacotron2-DDC-GST"

# Other architectures
GLOW_TTS = "glow-tts"
FAST_PITCH = "fast_pitch"
SPEEDY_SPEECH = "speedy-speech"
OVERFLOW = "overflow"
NEURAL_HMM = "neural_hmm"
TORTOISE_V2 = "tortoise-v2"
CAPACITRON_T2_C50 = "capacitron-t2-c50"
CAPACITRON_T2_C150_V2 = "capacitron-t2-c150_v2"
JENNY = "jenny"


def _preset(
    dataset: str,
    architecture: str,
    default_language: str,
    supported_languages: list[str] | None = None,
    voice_cloning: bool = False,
) -> ModelIdentifier:
    supported = tuple(supported_languages or [default_language])
    return ModelIdentifier(
        category=CATEGORY_TTS,
        dataset=dataset,
        architecture=architecture,
        default_language=default_language,
        supported_languages=supported,
        voice_cloning=voice_cloning,
        # Families such as CV or CSS10 are published as one model per language
        per_language=1 < len(supported) < len(lang.get_supported_languages()),
    )


# Multilingual models (all languages, voice cloning)
XTTS_V2_MULTI_DATASET = _preset(
    ds.MULTI_DATASET, XTTS_V2, lang.ENGLISH, lang.get_supported_languages(), True
)
XTTS_V1_MULTI_DATASET = _preset(
    ds.MULTI_DATASET, XTTS_V1, lang.ENGLISH, lang.get_supported_languages(), True
)
YOUR_TTS_MULTI_DATASET = _preset(
    ds.MULTI_DATASET, YOUR_TTS, lang.ENGLISH, lang.get_supported_languages(), True
)
BARK_MULTI_DATASET = _preset(
    ds.MULTI_DATASET, BARK, lang.ENGLISH, lang.get_supported_languages(), True
)

# Common Voice (CV) models, one per European language.
# English is not published for this family, so Bulgarian is the default.
VITS_CV = _preset(
    ds.CV,
    VITS,
    lang.BULGARIAN,
    [
        lang.BULGARIAN,
        lang.CZECH,
        lang.DANISH,
        lang.ESTONIAN,
        lang.IRISH,
        lang.GREEK,
        lang.CROATIAN,
        lang.LITHUANIAN,
        lang.LATVIAN,
        lang.MALTESE,
        lang.PORTUGUESE,
        lang.ROMANIAN,
        lang.SLOVAK,
        lang.SLOVENIAN,
        lang.SWEDISH,
    ],
)

# English models
TACOTRON2_EK1 = _preset(ds.EK1, TACOTRON2, lang.ENGLISH)
TACOTRON2_DDC_LJSPEECH = _preset(ds.LJSPEECH, TACOTRON2_DDC, lang.ENGLISH)
TACOTRON2_DDC_PH_LJSPEECH = _preset(ds.LJSPEECH, TACOTRON2_DDC_PH, lang.ENGLISH)
GLOW_TTS_LJSPEECH = _preset(ds.LJSPEECH, GLOW_TTS, lang.ENGLISH)
SPEEDY_SPEECH_LJSPEECH = _preset(ds.LJSPEECH, SPEEDY_SPEECH, lang.ENGLISH)
TACOTRON2_DCA_LJSPEECH = _preset(ds.LJSPEECH, TACOTRON2_DCA, lang.ENGLISH)
VITS_LJSPEECH = _preset(ds.LJSPEECH, VITS, lang.ENGLISH)
VITS_NEON_LJSPEECH = _preset(ds.LJSPEECH, VITS_NEON, lang.ENGLISH)
FAST_PITCH_LJSPEECH = _preset(ds.LJSPEECH, FAST_PITCH, lang.ENGLISH)
OVERFLOW_LJSPEECH = _preset(ds.LJSPEECH, OVERFLOW, lang.ENGLISH)
NEURAL_HMM_LJSPEECH = _preset(ds.LJSPEECH, NEURAL_HMM, lang.ENGLISH)
VITS_VCTK = _preset(ds.VCTK, VITS, lang.ENGLISH)
FAST_PITCH_VCTK = _preset(ds.VCTK, FAST_PITCH, lang.ENGLISH)
TACOTRON2_DDC_SAM = _preset(ds.SAM, TACOTRON2_DDC, lang.ENGLISH)
CAPACITRON_T2_C50_BLIZZARD = _preset(ds.BLIZZARD2013, CAPACITRON_T2_C50, lang.ENGLISH)
CAPACITRON_T2_C150_V2_BLIZZARD = _preset(
    ds.BLIZZARD2013, CAPACITRON_T2_C150_V2, lang.ENGLISH
)
TORTOISE_V2_MULTI_DATASET = _preset(ds.MULTI_DATASET, TORTOISE_V2, lang.ENGLISH)
JENNY_JENNY = _preset(ds.JENNY, JENNY, lang.ENGLISH)

# Mai models
TACOTRON2_DDC_MAI = _preset(
    ds.MAI, TACOTRON2_DDC, lang.SPANISH, [lang.SPANISH, lang.FRENCH, lang.DUTCH]
)
GLOW_TTS_MAI = _preset(ds.MAI, GLOW_TTS, lang.UKRAINIAN)
VITS_MAI = _preset(ds.MAI, VITS, lang.UKRAINIAN)

# CSS10 models
VITS_CSS10 = _preset(
    ds.CSS10,
    VITS,
    lang.SPANISH,
    [
        lang.SPANISH,
        lang.FRENCH,
        lang.GERMAN,
        lang.DUTCH,
        lang.HUNGARIAN,
        lang.FINNISH,
    ],
)
VITS_NEON_CSS10 = _preset(ds.CSS10, VITS_NEON_DASH, lang.GERMAN)

# Language-specific models
TACOTRON2_DDC_GST_BAKER = _preset(ds.BAKER, TACOTRON2_DDC_GST, lang.CHINESE)
TACOTRON2_DCA_THORSTEN = _preset(ds.THORSTEN, TACOTRON2_DCA, lang.GERMAN)
VITS_THORSTEN = _preset(ds.THORSTEN, VITS, lang.GERMAN)
TACOTRON2_DDC_THORSTEN = _preset(ds.THORSTEN, TACOTRON2_DDC, lang.GERMAN)
TACOTRON2_DDC_KOKORO = _preset(ds.KOKORO, TACOTRON2_DDC, lang.JAPANESE)
GLOW_TTS_COMMON_VOICE = _preset(
    ds.COMMON_VOICE, GLOW_TTS, lang.TURKISH, [lang.TURKISH, lang.BELARUSIAN]
)
GLOW_TTS_MAI_FEMALE = _preset(ds.MAI_FEMALE, GLOW_TTS, lang.ITALIAN)
VITS_MAI_FEMALE = _preset(ds.MAI_FEMALE, VITS, lang.ITALIAN, [lang.ITALIAN, lang.POLISH])
GLOW_TTS_MAI_MALE = _preset(ds.MAI_MALE, GLOW_TTS, lang.ITALIAN)
VITS_MAI_MALE = _preset(ds.MAI_MALE, VITS, lang.ITALIAN)
VITS_OPENBIBLE = _preset(
    ds.OPENBIBLE,
    VITS,
    lang.HAUSA,
    [
        lang.EWE,
        lang.HAUSA,
        lang.LINGALA,
        lang.TWI_AKUAPEM,
        lang.TWI_ASANTE,
        lang.YORUBA,
    ],
)
VITS_CUSTOM = _preset(ds.CUSTOM, VITS, lang.CATALAN, [lang.CATALAN, lang.BENGALI])
GLOW_TTS_CUSTOM = _preset(ds.CUSTOM, GLOW_TTS, lang.PERSIAN)
VITS_MALE_CUSTOM = _preset(ds.CUSTOM, VITS_MALE, lang.BENGALI)
VITS_FEMALE_CUSTOM = _preset(ds.CUSTOM, VITS_FEMALE, lang.BENGALI)

DEFAULT_TTS_MODEL = XTTS_V2_MULTI_DATASET

_TTS_MODELS = ModelList(
    [
        # Multilingual
        XTTS_V2_MULTI_DATASET,
        XTTS_V1_MULTI_DATASET,
        YOUR_TTS_MULTI_DATASET,
        BARK_MULTI_DATASET,
        # Common Voice
        VITS_CV,
        # English
        TACOTRON2_EK1,
        TACOTRON2_DDC_LJSPEECH,
        TACOTRON2_DDC_PH_LJSPEECH,
        GLOW_TTS_LJSPEECH,
        SPEEDY_SPEECH_LJSPEECH,
        TACOTRON2_DCA_LJSPEECH,
        VITS_LJSPEECH,
        VITS_NEON_LJSPEECH,
        FAST_PITCH_LJSPEECH,
        OVERFLOW_LJSPEECH,
        NEURAL_HMM_LJSPEECH,
        VITS_VCTK,
        FAST_PITCH_VCTK,
        TACOTRON2_DDC_SAM,
        CAPACITRON_T2_C50_BLIZZARD,
        CAPACITRON_T2_C150_V2_BLIZZARD,
        TORTOISE_V2_MULTI_DATASET,
        JENNY_JENNY,
        # Multi-language families
        TACOTRON2_DDC_MAI,
        GLOW_TTS_MAI,
        VITS_MAI,
        VITS_CSS10,
        VITS_NEON_CSS10,
        # Language-specific
        TACOTRON2_DDC_GST_BAKER,
        TACOTRON2_DCA_THORSTEN,
        VITS_THORSTEN,
        TACOTRON2_DDC_THORSTEN,
        TACOTRON2_DDC_KOKORO,
        GLOW_TTS_COMMON_VOICE,
        GLOW_TTS_MAI_FEMALE,
        VITS_MAI_FEMALE,
        GLOW_TTS_MAI_MALE,
        VITS_MAI_MALE,
        VITS_OPENBIBLE,
        VITS_CUSTOM,
        GLOW_TTS_CUSTOM,
        VITS_MALE_CUSTOM,
        VITS_FEMALE_CUSTOM,
    ]
)


def get_tts_models() -> ModelList:
    """Get every preset TTS model."""
    return _TTS_MODELS


def new_tts_model(architecture: str, dataset: str, language: str) -> ModelIdentifier:
    """Create a custom TTS model identifier.

    Raises:
        ValueError: If any field is empty or unknown
    """
    return new_model(CATEGORY_TTS, architecture, dataset, language)
