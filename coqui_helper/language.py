"""Language codes understood by the Coqui TTS models.

Languages are plain strings, mostly ISO 639-1 two-letter codes (e.g. "en", "es").
A handful of Coqui models use longer identifiers ("hau", "tw_akuapem"), and two
pseudo-languages mark models that are not tied to a single language.
"""

# Major languages
ENGLISH = "en"
SPANISH = "es"
FRENCH = "fr"
GERMAN = "de"
ITALIAN = "it"
PORTUGUESE = "pt"
DUTCH = "nl"
CHINESE = "zh"
JAPANESE = "ja"

# European and other languages
POLISH = "pl"
TURKISH = "tr"
RUSSIAN = "ru"
CZECH = "cs"
UKRAINIAN = "uk"
HUNGARIAN = "hu"
KOREAN = "ko"
ARABIC = "ar"

# Nordic languages
DANISH = "da"
FINNISH = "fi"
SWEDISH = "sv"

# Baltic languages
ESTONIAN = "et"
LATVIAN = "lv"
LITHUANIAN = "lt"

# Slavic and Balkan languages
BULGARIAN = "bg"
CROATIAN = "hr"
SLOVAK = "sk"
SLOVENIAN = "sl"
ROMANIAN = "ro"
BELARUSIAN = "be"

# Other European languages
GREEK = "el"
IRISH = "ga"
MALTESE = "mt"
CATALAN = "ca"

# Asian languages
BENGALI = "bn"
PERSIAN = "fa"

# African languages
EWE = "ewe"
HAUSA = "hau"
LINGALA = "lin"
YORUBA = "yor"
TWI_AKUAPEM = "tw_akuapem"
TWI_ASANTE = "tw_asante"

# Models that are not bound to one language
UNIVERSAL = "universal"
MULTILINGUAL = "multilingual"

# Human-readable names, also accepted by parse_language()
_LANGUAGE_NAMES: dict[str, str] = {
    ENGLISH: "english",
    SPANISH: "spanish",
    FRENCH: "french",
    GERMAN: "german",
    ITALIAN: "italian",
    PORTUGUESE: "portuguese",
    DUTCH: "dutch",
    CHINESE: "chinese",
    JAPANESE: "japanese",
    POLISH: "polish",
    TURKISH: "turkish",
    RUSSIAN: "russian",
    CZECH: "czech",
    UKRAINIAN: "ukrainian",
    HUNGARIAN: "hungarian",
    KOREAN: "korean",
    ARABIC: "arabic",
    DANISH: "danish",
    FINNISH: "finnish",
    SWEDISH: "swedish",
    ESTONIAN: "estonian",
    LATVIAN: "latvian",
    LITHUANIAN: "lithuanian",
    BULGARIAN: "bulgarian",
    CROATIAN: "croatian",
    SLOVAK: "slovak",
    SLOVENIAN: "slovenian",
    ROMANIAN: "romanian",
    GREEK: "greek",
    IRISH: "irish",
    MALTESE: "maltese",
    CATALAN: "catalan",
    BENGALI: "bengali",
    PERSIAN: "persian",
    EWE: "ewe",
    HAUSA: "hausa",
    LINGALA: "lingala",
    YORUBA: "yoruba",
    TWI_AKUAPEM: "twi (akuapem)",
    TWI_ASANTE: "twi (asante)",
    BELARUSIAN: "belarusian",
    UNIVERSAL: "universal",
    MULTILINGUAL: "multilingual",
}

# Language support varies by model; this is the union over all presets.
_SUPPORTED_LANGUAGES: list[str] = list(_LANGUAGE_NAMES.keys())

_NAME_TO_CODE: dict[str, str] = {name: code for code, name in _LANGUAGE_NAMES.items()}


def is_supported(code: str) -> bool:
    """Check whether a language code is known."""
    return code in _LANGUAGE_NAMES


def parse_language(value: str) -> str:
    """Parse user input into a supported language code.

    Accepts plain codes ("en"), regional tags ("en-US", "es-ES") and
    language names ("English").

    Args:
        value: Language code, regional tag or name (case-insensitive)

    Returns:
        The normalized language code (e.g., "en")

    Raises:
        ValueError: If the value is empty or the language is not supported
    """
    if not value or not value.strip():
        raise ValueError("Language cannot be empty")

    lang = value.strip().lower()
    if lang in _NAME_TO_CODE:
        return _NAME_TO_CODE[lang]

    # "en-us" -> "en". Underscores are kept since they appear in real codes.
    if "-" in lang:
        lang = lang.split("-", 1)[0]

    if not is_supported(lang):
        raise ValueError(f"Unsupported language: '{value}'")
    return lang


def get_language_name(code: str) -> str:
    """Get the human-readable name for a language code.

    Raises:
        ValueError: If the code is not supported
    """
    if code not in _LANGUAGE_NAMES:
        raise ValueError(f"Unsupported language: '{code}'")
    return _LANGUAGE_NAMES[code]


def get_supported_languages() -> list[str]:
    """Get a copy of every supported language code."""
    return list(_SUPPORTED_LANGUAGES)
