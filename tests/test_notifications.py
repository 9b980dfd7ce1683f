import pytest

from sniffnet.language import Language
from sniffnet.translations import notifications as n


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_text(language):
    texts = [
        n.packets_threshold_translation(language),
        n.bytes_threshold_translation(language),
        n.per_second_translation(language),
        n.specify_multiples_translation(language),
        n.favorite_notification_translation(language),
        n.threshold_translation(language),
        n.volume_translation(language),
        n.sound_translation(language),
        n.open_report_translation(language),
        n.bytes_exceeded_translation(language),
        n.packets_exceeded_translation(language),
        n.favorite_transmitted_translation(language),
        n.no_notifications_set_translation(language),
        n.no_notifications_received_translation(language),
        n.only_last_30_translation(language),
    ]
    assert all(len(text) > 0 for text in texts)


def test_english_values():
    assert n.packets_threshold_translation(Language.EN) == "Notify me when a packets threshold is exceeded"
    assert n.open_report_translation(Language.EN) == "Open full report"
    assert n.threshold_translation(Language.IT) == "Soglia"
    assert n.bytes_exceeded_translation(Language.DE) == "Byte-Schwellenwert überschritten!"


def test_shared_entries():
    assert n.per_second_translation(Language.ES) == n.per_second_translation(Language.PT) == "(por segundo)"
    assert n.volume_translation(Language.FR) == n.volume_translation(Language.PT) == "Volume"
    assert n.sound_translation(Language.UK) == n.sound_translation(Language.RU) == "Звук"


def test_per_second_chinese_keeps_trailing_space():
    assert n.per_second_translation(Language.ZH) == "(每秒) "


def test_bytes_exceeded_value_trims():
    assert n.bytes_exceeded_value_translation(Language.EN, "  1.5 K ") == "1.5 K bytes have been exchanged"
    assert n.bytes_exceeded_value_translation(Language.PL, "2 M") == "Wymieniono 2 M bajtów"


@pytest.mark.parametrize("language", list(Language))
def test_bytes_exceeded_value_contains_value(language):
    assert "42 G" in n.bytes_exceeded_value_translation(language, "\t42 G\n")


def test_packets_exceeded_singular():
    assert n.packets_exceeded_value_translation(Language.EN, 1) == "1 packet has been exchanged"
    assert n.packets_exceeded_value_translation(Language.PT, 1) == "Foi trocado 1 pacote"
    assert n.packets_exceeded_value_translation(Language.SV, 1) == "1 paket har utbytts"


def test_packets_exceeded_plural():
    assert n.packets_exceeded_value_translation(Language.EN, 7) == "7 packets have been exchanged"
    assert n.packets_exceeded_value_translation(Language.FR, 3) == "3 paquets ont été échangés"


def test_packets_exceeded_no_singular_form():
    assert n.packets_exceeded_value_translation(Language.DE, 1) == "1 Pakete wurden ausgetauscht"


@pytest.mark.parametrize("language", list(Language))
def test_packets_exceeded_contains_count(language):
    assert "12345" in n.packets_exceeded_value_translation(language, 12345)


def test_no_notifications_set_persian_keeps_extra_break():
    text = n.no_notifications_set_translation(Language.FA)
    assert "\n\n\n" in text
    assert text.rstrip().endswith("شما می توانید اعلان ها را از پیکربندی فعال کنید:")


def test_no_notifications_received_english():
    assert n.no_notifications_received_translation(Language.EN) == (
        "Nothing to see at the moment...\n\n"
        "When you receive a notification, it will be displayed here"
    )