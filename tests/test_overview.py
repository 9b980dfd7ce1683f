import pytest

from sniffnet.language import Language
from sniffnet.translations import overview as ov

ALL_FUNCTIONS = [
    ov.both_translation,
    ov.all_translation,
    ov.packets_translation,
    ov.packets_chart_translation,
    ov.bytes_translation,
    ov.bytes_chart_translation,
    ov.recent_report_translation,
    ov.packets_report_translation,
    ov.bytes_report_translation,
    ov.notifications_title_translation,
    ov.appearance_title_translation,
    ov.languages_title_translation,
    ov.active_filters_translation,
    ov.none_translation,
    ov.yeti_night_translation,
    ov.yeti_day_translation,
    ov.deep_sea_translation,
    ov.mon_amour_translation,
    ov.incoming_translation,
    ov.outgoing_translation,
    ov.notifications_translation,
    ov.style_translation,
    ov.language_translation,
    ov.overview_translation,
]


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_text(language):
    texts = [
        ov.both_translation(language),
        ov.all_translation(language),
        ov.packets_translation(language),
        ov.packets_chart_translation(language),
        ov.bytes_translation(language),
        ov.bytes_chart_translation(language),
        ov.recent_report_translation(language),
        ov.packets_report_translation(language),
        ov.bytes_report_translation(language),
        ov.notifications_title_translation(language),
        ov.appearance_title_translation(language),
        ov.languages_title_translation(language),
        ov.active_filters_translation(language),
        ov.none_translation(language),
        ov.yeti_night_translation(language),
        ov.yeti_day_translation(language),
        ov.deep_sea_translation(language),
        ov.mon_amour_translation(language),
        ov.incoming_translation(language),
        ov.outgoing_translation(language),
        ov.notifications_translation(language),
        ov.style_translation(language),
        ov.language_translation(language),
        ov.overview_translation(language),
    ]
    assert len(texts) == len(ALL_FUNCTIONS)
    for text in texts:
        assert isinstance(text, str)
        assert text.strip() != ""
        assert text == text.strip()


@pytest.mark.parametrize(
    ("func", "expected"),
    [
        (ov.both_translation, "both"),
        (ov.all_translation, "All"),
        (ov.packets_translation, "packets"),
        (ov.packets_chart_translation, "packets per second"),
        (ov.bytes_translation, "bytes"),
        (ov.bytes_chart_translation, "bytes per second"),
        (ov.recent_report_translation, "most recent"),
        (ov.packets_report_translation, "most packets"),
        (ov.bytes_report_translation, "most bytes"),
        (ov.active_filters_translation, "Active filters"),
        (ov.none_translation, "none"),
        (ov.yeti_night_translation, "Sniffnet's original dark theme"),
        (ov.yeti_day_translation, "Sniffnet's original light theme"),
        (ov.incoming_translation, "Incoming"),
        (ov.outgoing_translation, "Outgoing"),
        (ov.style_translation, "Style"),
        (ov.language_translation, "Language"),
        (ov.overview_translation, "Overview"),
    ],
)
def test_english_texts(func, expected):
    assert func(Language.EN) == expected


def test_some_translations():
    assert ov.both_translation(Language.IT) == "entrambi"
    assert ov.packets_translation(Language.RU) == "пакектов"
    assert ov.bytes_translation(Language.FR) == "octets"
    assert ov.none_translation(Language.DE) == "keine"
    assert ov.overview_translation(Language.EL) == "επισκόπηση"
    assert ov.mon_amour_translation(Language.SV) == "Ljuvligt tema gjort för drömmare"


def test_shared_entries():
    assert ov.both_translation(Language.ES) == ov.both_translation(Language.PT) == "ambos"
    assert ov.all_translation(Language.ES) == ov.all_translation(Language.PT) == "Todos"
    assert ov.packets_translation(Language.TR) == ov.packets_translation(Language.SV) == "paket"
    assert ov.yeti_day_translation(Language.ES) == ov.yeti_day_translation(Language.PT)
    assert ov.notifications_translation(Language.EN) == ov.notifications_translation(Language.FR)
    assert ov.style_translation(Language.UK) == ov.style_translation(Language.RU) == "Стиль"


@pytest.mark.parametrize("language", [Language.DE, Language.RO, Language.TR, Language.SV])
def test_style_stil(language):
    assert ov.style_translation(language) == "Stil"


@pytest.mark.parametrize(
    "language",
    [Language.EN, Language.ES, Language.PT, Language.DE, Language.EL, Language.SV],
)
def test_bytes_untranslated_languages(language):
    assert ov.bytes_translation(language) == "bytes"


def test_chinese_chart_labels_match_plain_labels():
    assert ov.packets_chart_translation(Language.ZH) == ov.packets_translation(Language.ZH)
    assert ov.bytes_chart_translation(Language.ZH) == ov.bytes_translation(Language.ZH)


def test_incoming_and_outgoing_differ_everywhere():
    for language in Language:
        assert ov.incoming_translation(language) != ov.outgoing_translation(language)


def test_unknown_language_raises():
    with pytest.raises(KeyError):
        ov.overview_translation("XX")