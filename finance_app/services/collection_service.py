"""
Servizio CRUD generico per gli aggregati senza invarianti incrociate
(categorie, transazioni ricorrenti, obiettivi, budget).
"""
from finance_app.services import BaseService
from finance_app.utils.parsing import coerce_column_value

# colonne gestite dal server, mai accettate dal body
SERVER_COLUMNS = ('id', 'created_at', 'updated_at')


class CollectionService(BaseService):
    """Lettura e inserimento per un modello, con default per collezione"""

    def __init__(self, model, defaults=None):
        super().__init__()
        self.model = model
        self.defaults = defaults or {}

    @property
    def writable_columns(self):
        return [c for c in self.model.__table__.columns if c.key not in SERVER_COLUMNS]

    def get_all(self):
        return self.model.query.all()

    def build(self, data):
        """Costruisce l'istanza dai soli campi scrivibili, convertiti al tipo della colonna"""
        values = {}
        for column in self.writable_columns:
            value = coerce_column_value(column, data.get(column.key))
            if value is None:
                value = self.defaults.get(column.key)
            # None omesso: lascia agire i default della colonna
            if value is not None:
                values[column.key] = value
        return self.model(**values)

    def create(self, data):
        """Inserisce una riga; ritorna ``(success, message, row)``"""
        try:
            row = self.build(data or {})
        except ValueError as e:
            return False, str(e), None

        success, message = self.save(row)
        if not success:
            return False, message, None
        return True, message, row
