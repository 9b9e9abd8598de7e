"""Configurazione per il backend del ledger finanziario"""
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def _database_url():
    """Costruisce l'URI del database dalle variabili d'ambiente.

    Ordine: DATABASE_URL, poi le singole variabili DB_* (PostgreSQL),
    infine un file SQLite locale per lo sviluppo.
    """
    url = os.getenv('DATABASE_URL')
    if url:
        return url
    if os.getenv('DB_NAME'):
        return 'postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}'.format(
            user=os.getenv('DB_USER', ''),
            password=os.getenv('DB_PASSWORD', ''),
            host=os.getenv('DB_HOST', 'localhost'),
            port=os.getenv('DB_PORT', '5432'),
            name=os.getenv('DB_NAME'),
        )
    # relativo: Flask-SQLAlchemy lo crea nella cartella instance/
    return 'sqlite:///finance.db'


def engine_options(database_uri):
    """Opzioni del pool: READ COMMITTED su PostgreSQL (SQLite non lo supporta)"""
    options = {'pool_pre_ping': True}
    if database_uri.startswith('postgresql'):
        options['isolation_level'] = 'READ COMMITTED'
    return options


class Config:
    """Configurazione principale dell'applicazione"""

    # Database
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # namespace selezionato su ogni connessione del pool
    DB_SCHEMA = os.getenv('DB_SCHEMA', 'finance_app')

    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '80'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Tipi di transazione accettati dal ledger
    TRANSACTION_TYPES = ('income', 'expense', 'transfer')


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    """Configurazione per i test: SQLite in memoria (i fixture usano un file temporaneo)"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}


config = {
    'default': Config,
    'development': DevelopmentConfig,
    'testing': TestingConfig,
}
