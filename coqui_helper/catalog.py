"""Lookup across all preset catalogs by full Coqui model name."""

from .dataset import (
    CATEGORY_TTS,
    CATEGORY_VOCODER,
    CATEGORY_VOICE_CONVERSION,
    get_categories,
)
from .model import ModelIdentifier, ModelList, new_model
from .tts_models import get_tts_models
from .vocoder_models import get_vocoders, vocoder_name
from .voice_conversion_models import get_voice_conversion_models


def get_models(category: str | None = None) -> ModelList:
    """Get preset models, optionally restricted to one category.

    Args:
        category: 'tts_models', 'vocoder_models', 'voice_conversion_models' or None

    Raises:
        ValueError: If the category is unknown
    """
    if category is None:
        return ModelList(
            [*get_tts_models(), *get_vocoders(), *get_voice_conversion_models()]
        )
    if category == CATEGORY_TTS:
        return get_tts_models()
    if category == CATEGORY_VOCODER:
        return get_vocoders()
    if category == CATEGORY_VOICE_CONVERSION:
        return get_voice_conversion_models()

    supported = ", ".join(get_categories())
    raise ValueError(f"Unknown model category: '{category}'. Supported: {supported}")


def model_display_name(model: ModelIdentifier) -> str:
    """Name of a model as the tts command expects it."""
    if model.category == CATEGORY_VOCODER:
        return vocoder_name(model)
    return model.name()


def list_model_names(category: str | None = None) -> list[str]:
    """List the names of preset models, optionally for one category."""
    return [model_display_name(m) for m in get_models(category)]


def parse_model_name(name: str) -> ModelIdentifier:
    """Turn a full Coqui model name into an identifier.

    Presets are matched first, either by their full name or by one of their
    per-language names (in which case that language is selected). Vocoders
    match by their vocoder name only. Anything else becomes a custom
    identifier.

    Args:
        name: Model name such as 'tts_models/de/thorsten/vits'

    Returns:
        Matching preset or a new custom identifier

    Raises:
        ValueError: If the name is malformed or uses unknown parts
    """
    parts = name.strip().split("/")
    if len(parts) != 4 or not all(parts):
        raise ValueError(
            f"Invalid model name: '{name}'. "
            "Expected format: <category>/<language>/<dataset>/<architecture>"
        )

    category, language, dataset, architecture = parts
    models = get_models(category)

    if category == CATEGORY_VOCODER:
        for vocoder in models:
            if vocoder_name(vocoder) == name:
                return vocoder
    else:
        preset = models.find(name)
        if preset is not None:
            return preset

    return new_model(category, architecture, dataset, language)
