"""Conversione dei valori ricevuti nei body JSON verso i tipi delle colonne"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from sqlalchemy import Boolean, Date, DateTime, Integer, Numeric


def blank_to_none(value):
    """Le stringhe vuote (o solo spazi) valgono come "nessun riferimento"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_decimal(value, field_name='amount'):
    """Valida e converte un importo in Decimal (solo valori finiti)"""
    if isinstance(value, float):
        # passa dalla rappresentazione testuale per evitare 0.1 -> 0.1000000000000000055...
        value = repr(value)
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip().replace(',', '.'))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Valore non valido per {field_name}: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Valore non valido per {field_name}: {value!r}")
    return result


def parse_date(value, field_name='date'):
    """Valida e converte una data (YYYY-MM-DD, anche con orario ISO)"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise ValueError(f"Formato data non valido per {field_name} (YYYY-MM-DD): {value!r}")


def parse_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def coerce_column_value(column, value):
    """Converte ``value`` nel tipo Python atteso dalla colonna ``column``"""
    value = blank_to_none(value)
    if value is None:
        return None
    col_type = column.type
    if isinstance(col_type, DateTime):
        return datetime.fromisoformat(str(value)) if not isinstance(value, datetime) else value
    if isinstance(col_type, Date):
        return parse_date(value, column.key)
    if isinstance(col_type, Numeric):
        return parse_decimal(value, column.key)
    if isinstance(col_type, Boolean):
        return parse_bool(value)
    if isinstance(col_type, Integer):
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Valore intero non valido per {column.key}: {value!r}")
    return value
