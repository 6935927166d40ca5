"""Model categories and training dataset identifiers used in Coqui model names."""

# Model categories, the first segment of every model name
CATEGORY_TTS = "tts_models"
CATEGORY_VOCODER = "vocoder_models"
CATEGORY_VOICE_CONVERSION = "voice_conversion_models"

_CATEGORIES: list[str] = [
    CATEGORY_TTS,
    CATEGORY_VOCODER,
    CATEGORY_VOICE_CONVERSION,
]

# Universal/multilingual datasets
LIBRI_TTS = "libri-tts"
MULTI_DATASET = "multi-dataset"

# English datasets
LJSPEECH = "ljspeech"
VCTK = "vctk"
EK1 = "ek1"
SAM = "sam"
BLIZZARD2013 = "blizzard2013"
JENNY = "jenny"

# Language-specific datasets
MAI = "mai"
CSS10 = "css10"
CV = "cv"
COMMON_VOICE = "common-voice"
THORSTEN = "thorsten"
BAKER = "baker"
KOKORO = "kokoro"
OPENBIBLE = "openbible"
CUSTOM = "custom"

# Dataset variants
MAI_FEMALE = "mai_female"
MAI_MALE = "mai_male"

_DATASETS: list[str] = [
    LIBRI_TTS,
    MULTI_DATASET,
    LJSPEECH,
    VCTK,
    EK1,
    SAM,
    BLIZZARD2013,
    JENNY,
    MAI,
    CSS10,
    CV,
    COMMON_VOICE,
    THORSTEN,
    BAKER,
    KOKORO,
    OPENBIBLE,
    CUSTOM,
    MAI_FEMALE,
    MAI_MALE,
]


def is_preset_dataset(dataset: str) -> bool:
    """Check whether a dataset is one of the known identifiers."""
    return dataset in _DATASETS


def is_valid_category(category: str) -> bool:
    """Check whether a model category is known."""
    return category in _CATEGORIES


def get_datasets() -> list[str]:
    """Get a copy of every known dataset identifier."""
    return list(_DATASETS)


def get_categories() -> list[str]:
    """Get a copy of every model category."""
    return list(_CATEGORIES)
