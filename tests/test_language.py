import pytest

from sniffnet.language import LANGUAGE_ROWS, Language


def test_default_is_english():
    assert Language.default() is Language.EN


@pytest.mark.parametrize(
    ("language", "label"),
    [
        (Language.EN, "English"),
        (Language.IT, "Italiano"),
        (Language.FR, "Français"),
        (Language.DE, "Deutsch"),
        (Language.ZH, "简体中文"),
        (Language.EL, "Ελληνικά"),
        (Language.FA, "فارسی"),
        (Language.SV, "Svenska"),
    ],
)
def test_radio_label(language, label):
    assert language.radio_label() == label


def test_every_language_has_a_distinct_label():
    labels = [Language.radio_label(language) for language in Language]
    assert len(set(labels)) == len(list(Language))
    assert all(labels)
    assert Language.default().radio_label() in labels


def test_value_round_trip():
    for language in Language:
        assert Language(language.value) is language


def test_unknown_code_rejected():
    with pytest.raises(ValueError):
        Language("XX")


def test_rows_cover_every_language_once():
    flat = [language for row in LANGUAGE_ROWS for language in row]
    assert len(flat) == len(set(flat))
    assert set(flat) == {Language(language.value) for language in Language}
    assert all(len(row) == 4 for row in LANGUAGE_ROWS)
    assert Language.default() in flat


def test_rows_are_in_alphabetical_order_of_code():
    codes = [language.value for row in LANGUAGE_ROWS for language in row]
    assert codes == sorted(codes)
    assert LANGUAGE_ROWS[0][0] is Language.default()