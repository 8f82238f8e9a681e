from datetime import date, datetime

import pendulum
import pytest

from utils import dates


def test_parse_date_string_in_configured_zone():
    d = dates.parse_date("2024-03-15")
    assert d.timezone_name == "America/Argentina/Buenos_Aires"
    assert (d.year, d.month, d.day, d.hour) == (2024, 3, 15, 0)


def test_parse_date_naive_datetime_is_utc():
    # 02:00 UTC es 23:00 del día anterior en Buenos Aires (UTC-3)
    d = dates.parse_date(datetime(2024, 3, 16, 2, 0))
    assert d.day == 15
    assert d.hour == 23


def test_parse_date_plain_date():
    d = dates.parse_date(date(2024, 3, 15))
    assert dates.format_for_input(d) == "2024-03-15"


@pytest.mark.parametrize("value", ["", "no-es-fecha", "2024-13-45", None, 42])
def test_is_valid_date_rejects(value):
    assert dates.is_valid_date(value) is False


def test_is_valid_date_accepts_iso():
    assert dates.is_valid_date("2024-03-15")
    assert dates.is_valid_date("2024-03-15T10:30:00Z")


def test_to_storage_is_naive_utc():
    stored = dates.to_storage("2024-03-15")
    assert stored.tzinfo is None
    assert stored == datetime(2024, 3, 15, 3, 0)


def test_create_date_range_covers_whole_day():
    rango = dates.create_date_range("2024-03-15")
    assert dates.to_storage(rango.inicio) == datetime(2024, 3, 15, 3, 0)
    assert dates.to_storage(rango.fin) == datetime(2024, 3, 16, 2, 59, 59, 999999)


def test_format_for_display_spanish():
    texto = dates.format_for_display("2024-03-15")
    assert "15 de marzo de 2024" in texto
    assert texto.startswith("viernes")


def test_to_iso_string_utc():
    assert dates.to_iso_string("2024-03-15").startswith("2024-03-15T03:00:00")


def test_relative_dates():
    ahora = dates.today()
    assert dates.is_today(ahora)
    assert dates.get_relative_date(ahora) == "Hoy"
    assert dates.is_yesterday(ahora.subtract(days=1))
    assert dates.get_relative_date(ahora.subtract(days=1)) == "Ayer"
    assert dates.get_relative_date(ahora.subtract(days=10)) != "Hoy"


def test_is_same_day_across_zones():
    a = pendulum.datetime(2024, 3, 16, 1, 0, tz="UTC")
    assert dates.is_same_day(a, "2024-03-15")


def test_today_for_input_format():
    assert len(dates.today_for_input()) == 10
