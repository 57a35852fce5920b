"""
Application Configuration

Centralizes Flask, planner and logging configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_float(name, default):
    """Read a float from the environment, falling back to default when unset or malformed."""
    try:
        return float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///planner.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Planner settings
    PLANNER_WEEKLY_BUDGET = _env_float('PLANNER_WEEKLY_BUDGET', 125.0)
    PLANNER_TEEN_FACTOR = _env_float('PLANNER_TEEN_FACTOR', 0.75)
    PLANNER_CHILD_FACTOR = _env_float('PLANNER_CHILD_FACTOR', 0.5)
    PLANNER_MIN_DELIVERY_AMOUNT = _env_float('PLANNER_MIN_DELIVERY_AMOUNT', 0.0)

    # Seed the catalog table on first start
    SEED_CATALOG = True


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])


# Logging Configuration
LOG_LEVEL = os.environ.get('PLANNER_LOG_LEVEL', 'INFO').upper()
LOG_FILE = os.environ.get('PLANNER_LOG_FILE', '')

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        },
        "detailed": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "stream": "ext://sys.stdout"
        }
    },
    "root": {
        "level": LOG_LEVEL,
        "handlers": ["console"]
    }
}

if LOG_FILE:
    LOGGING_CONFIG["handlers"]["file"] = {
        "class": "logging.handlers.RotatingFileHandler",
        "level": "DEBUG",
        "formatter": "detailed",
        "filename": LOG_FILE,
        "maxBytes": 10485760,  # 10MB
        "backupCount": 5
    }
    LOGGING_CONFIG["root"]["handlers"].append("file")
