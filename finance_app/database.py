"""
Configurazione del motore SQLAlchemy e inizializzazione dello schema.

Ogni connessione aperta dal pool viene legata al namespace dell'applicazione
(``search_path`` su PostgreSQL). Su SQLite attiviamo le foreign key, che
altrimenti sarebbero ignorate, così che l'integrità referenziale valga
anche in sviluppo e nei test.
"""
import logging
from sqlalchemy import event, text

logger = logging.getLogger(__name__)


def configure_engine(engine, schema=None):
    """Registra i listener di connessione sul motore indicato"""
    dialect = engine.dialect.name

    if dialect == 'postgresql' and schema:
        @event.listens_for(engine, 'connect')
        def _set_search_path(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute(f'SET search_path TO "{schema}", public')
            finally:
                cursor.close()
            # il SET apre una transazione implicita con psycopg2
            dbapi_connection.commit()

    elif dialect == 'sqlite':
        @event.listens_for(engine, 'connect')
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute('PRAGMA foreign_keys=ON')
            finally:
                cursor.close()

    logger.debug('Engine %s configurato (schema=%s)', dialect, schema)


def init_database(db, schema=None):
    """Crea lo schema (solo PostgreSQL) e le tabelle mancanti.

    Non esegue migrazioni: le tabelle esistenti non vengono modificate.
    """
    if db.engine.dialect.name == 'postgresql' and schema:
        with db.engine.begin() as conn:
            conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{schema}"'))
    db.create_all()
    logger.info('Tabelle del database verificate/create')
