"""
Configuration classes for the expense ledger Flask application.

Usage:
    from config import config
    app.config.from_object(config[config_name])
"""
import os


class Config:
    """Base configuration with defaults."""

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///database.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Password hashing (werkzeug method string, salt is embedded in the hash)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')

    # Origins allowed to call the JSON API from a browser (comma-separated)
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')

    # Rate limiting (Flask-Limiter config keys)
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL', 'memory://')
    AUTH_RATE_LIMIT = os.environ.get('AUTH_RATE_LIMIT', '10 per minute')

    PORT = int(os.environ.get('PORT', 3000))


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False

    # Production: use /data directory which is mounted to persistent disk
    # Note: 4 slashes = sqlite:// + absolute path /data/database.db
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:////data/database.db')


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

    # Fewer iterations keep the test suite fast
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'

    # Disable rate limiting for tests
    RATELIMIT_ENABLED = False


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}


def get_config_name():
    """Get configuration name from environment."""
    flask_env = os.environ.get('FLASK_ENV', 'development')
    if flask_env == 'production':
        return 'production'
    elif os.environ.get('TESTING'):
        return 'testing'
    return 'development'
