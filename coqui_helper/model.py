"""
Model identifiers and filterable model lists.

A model identifier describes one Coqui model: its category, training dataset,
architecture and languages. Identifiers are immutable; changing the language
produces a new identifier.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

from .dataset import is_preset_dataset, is_valid_category
from .language import (
    MULTILINGUAL,
    UNIVERSAL,
    get_supported_languages,
    is_supported,
)


@dataclass(frozen=True)
class ModelIdentifier:
    """Identifier of a Coqui model."""

    category: str
    """Model category (e.g., 'tts_models', 'vocoder_models')."""

    dataset: str
    """Training dataset (e.g., 'ljspeech', 'vctk')."""

    architecture: str
    """Model architecture (e.g., 'vits', 'xtts_v2')."""

    default_language: str
    """Primary language of the model."""

    current_language: str = ""
    """Language selected for synthesis (defaults to default_language)."""

    supported_languages: tuple[str, ...] = ()
    """All languages the model can speak."""

    voice_cloning: bool = False
    """Whether the model can be conditioned on a speaker sample."""

    is_custom: bool = False
    """Whether the model is user-defined rather than a preset."""

    per_language: bool = False
    """Whether the model is published once per language (e.g. the CV family),
    so its name carries the current language even when it has several."""

    def __post_init__(self) -> None:
        """Normalize fields after initialization."""
        if not self.current_language:
            object.__setattr__(self, "current_language", self.default_language)
        # Accept lists from callers but store a hashable tuple.
        object.__setattr__(
            self, "supported_languages", tuple(self.supported_languages)
        )

    def name(self) -> str:
        """Full Coqui model name: category/language/dataset/architecture.

        Models that support more than one language use "multilingual"
        in place of the language, unless they are published per language.
        """
        if self.is_multilingual() and not self.per_language:
            language = MULTILINGUAL
        else:
            language = self.current_language
        return self._name_for(language)

    def name_list(self) -> list[str]:
        """Per-language model names, one for each supported language.

        The "universal" and "multilingual" placeholders are not languages
        and get no entry.
        """
        return [self._name_for(lang) for lang in self._real_languages()]

    def _real_languages(self) -> list[str]:
        return [
            lang
            for lang in self.supported_languages
            if lang not in (UNIVERSAL, MULTILINGUAL)
        ]

    def _name_for(self, language: str) -> str:
        return f"{self.category}/{language}/{self.dataset}/{self.architecture}"

    def validate(self) -> None:
        """Check the identifier and explain why it is invalid.

        Raises:
            ValueError: If any field is missing or inconsistent
        """
        if not is_valid_category(self.category):
            raise ValueError(f"unsupported model type: {self.category!r}")
        if not self.architecture:
            raise ValueError(
                f"architecture cannot be empty for model type: {self.category}"
            )
        if not self.dataset:
            raise ValueError(f"dataset cannot be empty for model type: {self.category}")

        # Custom models only need the name parts
        if self.is_custom:
            return

        if not self.supported_languages:
            raise ValueError(
                f"supported languages cannot be empty for model type: {self.category}"
            )
        if self.current_language not in self.supported_languages:
            raise ValueError(
                f"language {self.current_language!r} is not supported by "
                f"{self.category}/{self.dataset}/{self.architecture}"
            )

    def is_valid(self) -> bool:
        """Check whether validate() passes."""
        try:
            self.validate()
        except ValueError:
            return False
        return True

    def is_multilingual(self) -> bool:
        """Check whether the model supports more than one language."""
        return len(self.supported_languages) > 1

    def supports_language(self, language: str) -> bool:
        """Check whether the model supports a language."""
        return language in self.supported_languages

    def supports_voice_cloning(self) -> bool:
        """Check whether a speaker sample can be used. Custom models are assumed to."""
        return self.is_custom or self.voice_cloning

    def with_language(self, language: str) -> "ModelIdentifier":
        """Return a copy with a different current language.

        Raises:
            ValueError: If the language is unknown or not supported by the model
        """
        if not is_supported(language):
            raise ValueError(f"invalid language specified: {language!r}")
        if not self.supports_language(language):
            raise ValueError(
                f"model {self.name()} does not support language {language!r}"
            )
        return replace(self, current_language=language)


def new_model(
    category: str, architecture: str, dataset: str, language: str
) -> ModelIdentifier:
    """Create a custom model identifier.

    Useful for models that are not part of the preset catalogs.

    Args:
        category: Model category (e.g., 'tts_models')
        architecture: Model architecture (e.g., 'vits')
        dataset: Training dataset (must be a known dataset)
        language: Language code; 'universal' or 'multilingual' mean all languages

    Returns:
        A custom ModelIdentifier

    Raises:
        ValueError: If any field is empty or unknown
    """
    if not category:
        raise ValueError("model type cannot be empty")
    if not language:
        raise ValueError("language cannot be empty")
    if not dataset:
        raise ValueError("dataset cannot be empty")
    if not architecture:
        raise ValueError("model architecture cannot be empty")

    if not is_valid_category(category):
        raise ValueError(f"unsupported model type: {category}")
    if not is_supported(language):
        raise ValueError(f"unsupported language: {language}")
    if not is_preset_dataset(dataset):
        raise ValueError(f"unsupported dataset: {dataset}")

    if language in (UNIVERSAL, MULTILINGUAL):
        supported = tuple(get_supported_languages())
    else:
        supported = (language,)

    return ModelIdentifier(
        category=category,
        dataset=dataset,
        architecture=architecture,
        default_language=language,
        current_language=language,
        supported_languages=supported,
        is_custom=True,
    )


class ModelList(Sequence[ModelIdentifier]):
    """Immutable list of model identifiers with chainable filters.

    Example:
        >>> from coqui_helper.tts_models import get_tts_models
        >>> german_vits = (
        ...     get_tts_models()
        ...     .filter_by_architecture("vits")
        ...     .filter_by_default_language("de")
        ... )
    """

    def __init__(self, models: Iterable[ModelIdentifier] = ()):
        self._models: tuple[ModelIdentifier, ...] = tuple(models)

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return ModelList(self._models[index])
        return self._models[index]

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[ModelIdentifier]:
        return iter(self._models)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModelList):
            return self._models == other._models
        return NotImplemented

    def __repr__(self) -> str:
        return f"ModelList({len(self._models)} models)"

    def filter_by_architecture(self, architecture: str) -> "ModelList":
        return ModelList(m for m in self._models if m.architecture == architecture)

    def filter_by_dataset(self, dataset: str) -> "ModelList":
        return ModelList(m for m in self._models if m.dataset == dataset)

    def filter_by_supported_languages(self, languages: Iterable[str]) -> "ModelList":
        """Keep models supporting any of the given languages."""
        wanted = set(languages)
        return ModelList(
            m for m in self._models if wanted.intersection(m.supported_languages)
        )

    def filter_by_multilingual(self) -> "ModelList":
        return ModelList(m for m in self._models if m.is_multilingual())

    def filter_by_default_language(self, language: str) -> "ModelList":
        return ModelList(m for m in self._models if m.default_language == language)

    def filter_by_voice_cloning(self) -> "ModelList":
        return ModelList(m for m in self._models if m.supports_voice_cloning())

    def names(self) -> list[str]:
        """Full names of every model in the list."""
        return [m.name() for m in self._models]

    def find(self, name: str) -> ModelIdentifier | None:
        """Find a model by full name or by one of its per-language names.

        Per-language names only match models published per language. When
        one matches, the returned identifier has that language selected.

        Args:
            name: Full model name (e.g., 'tts_models/de/thorsten/vits')

        Returns:
            The matching identifier, or None
        """
        for model in self._models:
            if model.name() == name:
                return model
        for model in self._models:
            if not model.per_language:
                continue
            if name in model.name_list():
                return replace(model, current_language=name.split("/")[1])
        return None
