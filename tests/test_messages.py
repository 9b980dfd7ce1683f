import pytest

from sniffnet.language import Language
from sniffnet.translations.messages import (
    error_translation,
    filtered_bytes_translation,
    filtered_packets_translation,
    no_addresses_translation,
    of_total_translation,
    some_observed_translation,
    waiting_translation,
)

ALL_LANGUAGES = list(Language)


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_no_addresses_mentions_adapter(language):
    text = no_addresses_translation(language, "eth-sample")
    assert "eth-sample" in text
    assert "{" not in text


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_waiting_mentions_adapter(language):
    text = waiting_translation(language, "wlan-sample")
    assert "wlan-sample" in text
    assert "{" not in text


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_some_observed_layout(language):
    text = some_observed_translation(language, "1234", "Active filters:\n   none")
    assert "1234" in text
    assert text.endswith("\n\nActive filters:\n   none")
    assert ": 0\n\n" in text


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_error_ends_with_error(language):
    text = error_translation(language, "boom")
    assert text.endswith("! \n\nboom")


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_of_total_contains_percentage(language):
    text = of_total_translation(language, "42.0%")
    assert "(" in text and ")" in text
    assert "42.0%" in text


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_filtered_labels_present(language):
    assert filtered_packets_translation(language).strip()
    assert filtered_bytes_translation(language).strip()


def test_no_addresses_english_exact():
    assert no_addresses_translation(Language.EN, "en0") == (
        "No traffic can be observed because the adapter you selected has no active addresses...\n\n"
        "Network adapter: en0\n\n"
        "If you are sure you are connected to the internet, try choosing a different adapter."
    )


def test_waiting_english_exact():
    assert waiting_translation(Language.EN, "en0") == (
        "No traffic has been observed yet. Waiting for network packets...\n\n"
        "Network adapter: en0\n\n"
        "Are you sure you are connected to the internet and you have selected the correct adapter?"
    )


def test_waiting_persian_keeps_line_breaks():
    text = waiting_translation(Language.FA, "en0")
    assert "\n\n\n" in text
    assert "en0" in text


def test_of_total_values():
    assert of_total_translation(Language.EN, "12.5%") == "(12.5% of the total)"
    assert of_total_translation(Language.TR, "12.5%") == "toplamın (12.5%)"
    assert of_total_translation(Language.IT, "12.5%") == "(12.5% del totale)"


def test_error_english_exact():
    assert error_translation(Language.EN, "boom") == "An error occurred! \n\nboom"


def test_filtered_labels_values():
    assert filtered_packets_translation(Language.EN) == "Filtered packets"
    assert filtered_bytes_translation(Language.EN) == "Filtered bytes"
    assert filtered_bytes_translation(Language.ES) == filtered_bytes_translation(Language.PT)
    assert filtered_bytes_translation(Language.ES) == "Bytes filtrados"


def test_some_observed_english_exact():
    assert some_observed_translation(Language.EN, "7", "x") == (
        "Total intercepted packets: 7\n\n"
        "Filtered packets: 0\n\n"
        "Some packets have been intercepted, but still none has been selected "
        "according to the filters you specified...\n\nx"
    )


def test_translations_differ_between_languages():
    assert filtered_packets_translation(Language.IT) != filtered_packets_translation(Language.EN)
    assert error_translation(Language.DE, "e") != error_translation(Language.EN, "e")


def test_unknown_language_rejected():
    with pytest.raises(KeyError):
        filtered_packets_translation("EN")