"""Backend Flask per il ledger finanziario personale"""

from flask import Flask, g, request, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from werkzeug.exceptions import HTTPException
from finance_app.config import config

# Istanze globali
db = SQLAlchemy()


def create_app(config_name='default', overrides=None):
    """Factory pattern per creare l'applicazione Flask.

    ``overrides`` permette di sostituire singole chiavi di configurazione
    (es. l'URI del database nei test) prima di inizializzare le estensioni.
    """
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Inizializza le estensioni
    db.init_app(app)
    CORS(app)

    # Registra i modelli e configura il pool (search_path / foreign keys)
    from finance_app import models  # noqa: F401
    from finance_app.database import configure_engine
    with app.app_context():
        configure_engine(db.engine, app.config.get('DB_SCHEMA'))

    # Identità dichiarata dal token bearer: solo un suggerimento, mai verificata
    @app.before_request
    def extract_claimed_identity():
        from finance_app.utils.identity import extract_identity
        g.user_id, g.user_email = extract_identity(request.headers.get('Authorization'))

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    # Importa e registra i blueprint
    from finance_app.views.main import main_bp
    from finance_app.views.accounts import accounts_bp
    from finance_app.views.transactions import transactions_bp
    from finance_app.views.users import users_bp
    from finance_app.views.settings import settings_bp
    from finance_app.views.collections import collection_blueprints

    app.register_blueprint(main_bp)
    app.register_blueprint(accounts_bp, url_prefix='/accounts')
    app.register_blueprint(transactions_bp, url_prefix='/transactions')
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(settings_bp)
    for bp, prefix in collection_blueprints():
        app.register_blueprint(bp, url_prefix=prefix)

    return app
