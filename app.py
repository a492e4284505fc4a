"""
Main Flask application for the personal expense ledger.
"""
import logging

import click
from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy import event, inspect

from extensions import db, limiter
from config import config, get_config_name
from blueprints import register_blueprints
from services import AccountService, LedgerService
from stores import CredentialStore, LedgerStore

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Build the app. Tables exist before the app is returned."""
    app = Flask(__name__)

    # Load configuration from centralized config module
    app.config.from_object(config[config_name or get_config_name()])

    # Initialize extensions with app
    db.init_app(app)
    limiter.init_app(app)  # Reads RATELIMIT_* from app.config

    # CORS
    origins = [o.strip() for o in app.config['CORS_ALLOWED_ORIGINS'].split(',') if o.strip()]
    CORS(app, resources={r"/*": {"origins": origins}})

    # Both stores share the one database handle
    app.extensions['account_service'] = AccountService(
        CredentialStore(db),
        hash_method=app.config['PASSWORD_HASH_METHOD']
    )
    app.extensions['ledger_service'] = LedgerService(LedgerStore(db))

    register_blueprints(app)
    register_http_hooks(app)
    register_commands(app)

    init_db(app)

    return app


# ============================================================================
# HTTP Middleware
# ============================================================================

def register_http_hooks(app):
    """Attach security headers, the health check and JSON error pages."""

    @app.after_request
    def add_headers(response):
        """Add security headers to all responses."""
        # Prevent MIME type sniffing
        response.headers['X-Content-Type-Options'] = 'nosniff'

        # Prevent clickjacking
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'

        # Referrer policy
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        return response

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({'message': 'Too many requests. Please try again later.'}), 429

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({'message': 'Internal server error'}), 500


# ============================================================================
# Database lifecycle
# ============================================================================

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def init_db(app):
    """Create database tables if they don't exist.

    Safe to run repeatedly. Runs before the first request is served.
    """
    with app.app_context():
        if db.engine.dialect.name == 'sqlite' and not event.contains(
                db.engine, 'connect', _enable_sqlite_foreign_keys):
            event.listen(db.engine, 'connect', _enable_sqlite_foreign_keys)

        db.create_all()
        logger.info('Database tables created (if not already existing)')

        # Verify schema completeness - warn if any columns are missing
        verify_schema_completeness()


def verify_schema_completeness():
    """Check all model columns exist in database, log warnings for any missing.

    This runs at app startup to detect schema drift between code and an
    older database file.
    """
    from models import User, Expense

    inspector = inspect(db.engine)
    issues_found = False

    for model in (User, Expense):
        table_name = model.__tablename__
        db_columns = {col['name'] for col in inspector.get_columns(table_name)}
        model_columns = {col.name for col in model.__table__.columns}
        missing = model_columns - db_columns

        if missing:
            issues_found = True
            logger.warning(f'Table "{table_name}" missing columns: {sorted(missing)}')

    if not issues_found:
        logger.info('Schema verification passed - all model columns exist in database')

    return not issues_found


def close_db(app):
    """Release the database connections held by the app."""
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    logger.info('Database connections closed')


# ============================================================================
# CLI commands
# ============================================================================

def register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize the database."""
        init_db(app)
        click.echo('Database initialized!')

    @app.cli.command('category-totals')
    @click.argument('user_id', type=int)
    def category_totals_command(user_id):
        """Print a user's expense totals per category.

        Example:
            flask category-totals 1
        """
        totals = app.extensions['ledger_service'].category_totals(user_id)
        if not totals:
            click.echo(f'No expenses recorded for user {user_id}.')
            return

        for category, total in totals:
            click.echo(f'{category}: {total:.2f}')


if __name__ == '__main__':
    app = create_app()
    try:
        app.run(debug=app.debug, host='0.0.0.0', port=app.config['PORT'])
    finally:
        close_db(app)
