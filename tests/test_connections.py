import pytest

from sniffnet.language import Language
from sniffnet.translations import connections as c

SIMPLE = [
    c.new_version_available_translation,
    c.inspect_translation,
    c.connection_details_translation,
    c.dropped_packets_translation,
    c.data_representation_translation,
    c.host_translation,
    c.only_top_30_hosts_translation,
    c.sort_by_translation,
    c.local_translation,
    c.unknown_translation,
    c.your_network_adapter_translation,
    c.socket_address_translation,
    c.mac_address_translation,
    c.source_translation,
    c.destination_translation,
    c.fqdn_translation,
    c.administrative_entity_translation,
    c.transmitted_data_translation,
    c.country_translation,
    c.domain_name_translation,
    c.only_show_favorites_translation,
    c.search_filters_translation,
    c.no_search_results_translation,
    c.color_gradients_translation,
]


@pytest.mark.parametrize("language", list(Language))
def test_every_language_gets_non_empty_text(language):
    texts = [
        c.new_version_available_translation(language),
        c.inspect_translation(language),
        c.connection_details_translation(language),
        c.dropped_packets_translation(language),
        c.data_representation_translation(language),
        c.host_translation(language),
        c.only_top_30_hosts_translation(language),
        c.sort_by_translation(language),
        c.local_translation(language),
        c.unknown_translation(language),
        c.your_network_adapter_translation(language),
        c.socket_address_translation(language),
        c.mac_address_translation(language),
        c.source_translation(language),
        c.destination_translation(language),
        c.fqdn_translation(language),
        c.administrative_entity_translation(language),
        c.transmitted_data_translation(language),
        c.country_translation(language),
        c.domain_name_translation(language),
        c.only_show_favorites_translation(language),
        c.search_filters_translation(language),
        c.no_search_results_translation(language),
        c.color_gradients_translation(language),
    ]
    assert len(texts) == len(SIMPLE)
    assert all(isinstance(text, str) and text.strip() for text in texts)


@pytest.mark.parametrize("func", SIMPLE)
@pytest.mark.parametrize("language", [Language.PT, Language.UK, Language.RO])
def test_untranslated_languages_fall_back_to_english(func, language):
    assert func(language) == func(Language.EN)


@pytest.mark.parametrize(
    ("func", "language", "expected"),
    [
        (c.inspect_translation, Language.EN, "Inspect"),
        (c.inspect_translation, Language.FR, "Inspecter"),
        (c.inspect_translation, Language.PL, "Sprawdź"),
        (c.host_translation, Language.IT, "Host di rete"),
        (c.local_translation, Language.DE, "Lokales Netzwerk"),
        (c.unknown_translation, Language.ZH, "未知"),
        (c.destination_translation, Language.SV, "Destination"),
        (c.country_translation, Language.SV, "Land"),
        (c.country_translation, Language.DE, "Land"),
        (c.fqdn_translation, Language.ZH, "FQDN"),
        (c.new_version_available_translation, Language.EL,
         "Μια νεότερη έκδοση είναι διαθέσιμη στο GitHub"),
        (c.mac_address_translation, Language.FA, "آدرس MAC"),
    ],
)
def test_pinned_translations(func, language, expected):
    assert func(language) == expected


def test_french_falls_back_where_missing():
    assert c.sort_by_translation(Language.FR) == "Sort by"
    assert c.dropped_packets_translation(Language.EL) == "Dropped packets"


def test_showing_results_english():
    text = c.showing_results_translation(Language.EN, 1, 20, 150)
    assert text == "Showing 1-20 of 150 total results"


def test_showing_results_turkish_order():
    text = c.showing_results_translation(Language.TR, 21, 40, 99)
    assert text == "99 sonuç içinde 21-40"


def test_showing_results_fallback_and_placeholders():
    for language in Language:
        text = c.showing_results_translation(language, 7, 8, 9)
        assert "7-8" in text
        assert "9" in text
        assert "{" not in text
    assert c.showing_results_translation(Language.PT, 1, 2, 3) == (
        c.showing_results_translation(Language.EN, 1, 2, 3)
    )