"""Entry point per l'applicazione.

Questo script avvia l'app Flask e può inizializzare il database se
la variabile d'ambiente `INIT_DB` è impostata (es. INIT_DB=1).
"""

import os
from finance_app import create_app, db


def init_database(app):
    """Crea lo schema e le tabelle mancanti.
    Viene eseguita solo quando INIT_DB=1 per evitare side-effect non voluti
    in produzione; non esegue migrazioni.
    """
    from finance_app.database import init_database as _init
    _init(db, app.config.get('DB_SCHEMA'))


def main():
    app = create_app(os.environ.get('APP_CONFIG', 'default'))

    # Optional DB init (usare solo in fase di provisioning)
    if os.environ.get('INIT_DB') == '1':
        with app.app_context():
            init_database(app)

    app.run(host=app.config.get('HOST', '0.0.0.0'), port=app.config.get('PORT', 80),
            debug=app.config.get('DEBUG', False))


if __name__ == '__main__':
    main()
