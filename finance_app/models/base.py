"""
Funzionalità comuni dei modelli
"""
import uuid
from datetime import date, datetime
from decimal import Decimal


def new_uuid():
    """Identificatore generato lato applicazione per le righe dei modelli"""
    return str(uuid.uuid4())


class SerializerMixin:
    """Serializzazione JSON delle colonne di una riga.

    Decimali come stringhe (nessuna perdita di precisione), date e timestamp
    in formato ISO 8601.
    """

    def to_dict(self):
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, Decimal):
                value = str(value)
            elif isinstance(value, (date, datetime)):
                value = value.isoformat()
            result[column.key] = value
        return result
