"""Languages the user interface can be shown in."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """The available languages, identified by their two-letter code."""

    EN = "EN"  # English (default)
    IT = "IT"  # Italian
    FR = "FR"  # French
    ES = "ES"  # Spanish
    PL = "PL"  # Polish
    DE = "DE"  # German
    UK = "UK"  # Ukrainian
    ZH = "ZH"  # Simplified Chinese
    RO = "RO"  # Romanian
    KO = "KO"  # Korean
    PT = "PT"  # Portuguese
    TR = "TR"  # Turkish
    RU = "RU"  # Russian
    EL = "EL"  # Greek
    FA = "FA"  # Persian
    SV = "SV"  # Swedish

    @staticmethod
    def default() -> Language:
        """Return the language used when none is chosen."""
        return Language.EN

    def radio_label(self) -> str:
        """Return the language's own name, as shown in the language picker."""
        return _RADIO_LABELS[self]


_RADIO_LABELS: dict[Language, str] = {
    Language.EN: "English",
    Language.IT: "Italiano",
    Language.FR: "Français",
    Language.ES: "Español",
    Language.PL: "Polski",
    Language.DE: "Deutsch",
    Language.UK: "Українська",
    Language.ZH: "简体中文",
    Language.RO: "Română",
    Language.KO: "한국어",
    Language.TR: "Türkçe",
    Language.RU: "Русский",
    Language.PT: "Português",
    Language.EL: "Ελληνικά",
    Language.FA: "فارسی",
    Language.SV: "Svenska",
}

# Layout of the language picker: four rows of four languages each.
LANGUAGE_ROWS: tuple[tuple[Language, ...], ...] = (
    (Language.EN, Language.DE, Language.EL, Language.ES),
    (Language.FA, Language.FR, Language.IT, Language.KO),
    (Language.PL, Language.PT, Language.RO, Language.RU),
    (Language.SV, Language.TR, Language.UK, Language.ZH),
)