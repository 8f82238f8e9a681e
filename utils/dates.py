# utils/dates.py
"""
Utilidades de fechas ancladas a una sola zona horaria (APP_TIMEZONE).

Toda fecha de rutina pasa por aquí para que "hoy" y las fechas guardadas se
comparen en la misma zona, sin importar la hora local del servidor o del
cliente. En la BD se guarda el instante en UTC sin tzinfo.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import NamedTuple, Union

import pendulum
from pendulum import DateTime

from config.settings import APP_LOCALE, APP_TIMEZONE

DateLike = Union[str, datetime, date, DateTime]

DISPLAY_FORMAT = "dddd, D [de] MMMM [de] YYYY"
SHORT_FORMAT = "DD MMM YYYY"
INPUT_FORMAT = "YYYY-MM-DD"


class RangoFechas(NamedTuple):
    inicio: DateTime
    fin: DateTime


def today() -> DateTime:
    """Fecha y hora actual en la zona configurada."""
    return pendulum.now(APP_TIMEZONE)


def parse_date(value: DateLike) -> DateTime:
    """
    Convierte string ISO, datetime, date o DateTime a DateTime en la zona
    configurada.

    - strings sin offset y ``date`` se leen como día/hora local de la zona;
    - ``datetime`` sin tzinfo se lee como instante UTC (así vuelve de la BD).

    Lanza ValueError si el string no es una fecha válida.
    """
    if isinstance(value, DateTime):
        return value.in_timezone(APP_TIMEZONE)
    if isinstance(value, datetime):
        return pendulum.instance(value, tz="UTC").in_timezone(APP_TIMEZONE)
    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=APP_TIMEZONE)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Fecha vacía")
        parsed = pendulum.parse(text, tz=APP_TIMEZONE)
        if not isinstance(parsed, DateTime):
            raise ValueError(f"No es una fecha: {value!r}")
        return parsed.in_timezone(APP_TIMEZONE)
    raise TypeError(f"Tipo de fecha no soportado: {type(value).__name__}")


def is_valid_date(value: object) -> bool:
    if not isinstance(value, (str, date)):
        return False
    try:
        parse_date(value)
    except (ValueError, TypeError):
        return False
    return True


def format_for_display(value: DateLike) -> str:
    return parse_date(value).format(DISPLAY_FORMAT, locale=APP_LOCALE)


def format_short(value: DateLike) -> str:
    return parse_date(value).format(SHORT_FORMAT, locale=APP_LOCALE)


def format_month_short(value: DateLike) -> str:
    return parse_date(value).format("MMM", locale=APP_LOCALE)


def format_for_input(value: DateLike) -> str:
    return parse_date(value).format(INPUT_FORMAT)


def today_for_input() -> str:
    return format_for_input(today())


def to_iso_string(value: DateLike) -> str:
    return parse_date(value).in_timezone("UTC").to_iso8601_string()


def to_storage(value: DateLike) -> datetime:
    """Instante UTC como ``datetime`` naive para las columnas DateTime."""
    return parse_date(value).in_timezone("UTC").naive()


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return parse_date(a).date() == parse_date(b).date()


def is_today(value: DateLike) -> bool:
    return is_same_day(value, today())


def is_yesterday(value: DateLike) -> bool:
    return is_same_day(value, today().subtract(days=1))


def get_relative_date(value: DateLike) -> str:
    d = parse_date(value)
    if is_today(d):
        return "Hoy"
    if is_yesterday(d):
        return "Ayer"
    return d.diff_for_humans(locale=APP_LOCALE)


def create_date_range(value: DateLike) -> RangoFechas:
    """Inicio y fin (inclusive) del día calendario en la zona configurada."""
    d = parse_date(value)
    return RangoFechas(inicio=d.start_of("day"), fin=d.end_of("day"))
