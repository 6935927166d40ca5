"""Preset catalog of Coqui voice conversion models."""

from . import dataset as ds
from . import language as lang
from .dataset import CATEGORY_VOICE_CONVERSION
from .model import ModelIdentifier, ModelList, new_model

# Voice conversion architectures
FREEVC24 = "freevc24"
KNNVC = "knnvc"
OPENVOICE_V1 = "openvoice_v1"
OPENVOICE_V2 = "openvoice_v2"


def _preset(dataset: str, architecture: str) -> ModelIdentifier:
    return ModelIdentifier(
        category=CATEGORY_VOICE_CONVERSION,
        dataset=dataset,
        architecture=architecture,
        default_language=lang.ENGLISH,
        supported_languages=tuple(lang.get_supported_languages()),
    )


# voice_conversion_models/multilingual/vctk/freevc24
FREEVC24_VCTK = _preset(ds.VCTK, FREEVC24)
# voice_conversion_models/multilingual/multi-dataset/knnvc
KNNVC_MULTI_DATASET = _preset(ds.MULTI_DATASET, KNNVC)
# voice_conversion_models/multilingual/multi-dataset/openvoice_v1
OPENVOICE_V1_MULTI_DATASET = _preset(ds.MULTI_DATASET, OPENVOICE_V1)
# voice_conversion_models/multilingual/multi-dataset/openvoice_v2
OPENVOICE_V2_MULTI_DATASET = _preset(ds.MULTI_DATASET, OPENVOICE_V2)

_VOICE_CONVERSION_MODELS = ModelList(
    [
        FREEVC24_VCTK,
        KNNVC_MULTI_DATASET,
        OPENVOICE_V1_MULTI_DATASET,
        OPENVOICE_V2_MULTI_DATASET,
    ]
)


def get_voice_conversion_models() -> ModelList:
    """Get every preset voice conversion model."""
    return _VOICE_CONVERSION_MODELS


def new_voice_conversion_model(
    architecture: str, dataset: str, language: str
) -> ModelIdentifier:
    """Create a custom voice conversion model identifier.

    Raises:
        ValueError: If any field is empty or unknown
    """
    return new_model(CATEGORY_VOICE_CONVERSION, architecture, dataset, language)
