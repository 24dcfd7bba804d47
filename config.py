import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'postgresql://localhost/factboard')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True, 'pool_size': 5}

    # Facts API
    FACTS_API_URL = os.getenv('FACTS_API_URL', 'https://meowfacts.herokuapp.com/?count=5')
    FETCH_TIMEOUT_SECONDS = float(os.getenv('FETCH_TIMEOUT_SECONDS', '30'))

    # Read view
    PAGE_SIZE = int(os.getenv('PAGE_SIZE', '10'))

    # Scheduler
    SCHEDULER_ENABLED = os.getenv('SCHEDULER_ENABLED', 'true').lower() == 'true'
    SCHEDULER_API_ENABLED = False
    INGEST_INTERVAL_SECONDS = int(os.getenv('INGEST_INTERVAL_SECONDS', '3600'))
    INGEST_MAX_INSTANCES = int(os.getenv('INGEST_MAX_INSTANCES', '1'))
    INGEST_ON_STARTUP = os.getenv('INGEST_ON_STARTUP', 'false').lower() == 'true'

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///factboard-dev.db')
    SQLALCHEMY_ENGINE_OPTIONS = {}
    FETCH_TIMEOUT_SECONDS = float(os.getenv('FETCH_TIMEOUT_SECONDS', '5'))
    INGEST_INTERVAL_SECONDS = int(os.getenv('INGEST_INTERVAL_SECONDS', '30'))
    INGEST_ON_STARTUP = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool_size
    SCHEDULER_ENABLED = False
    FACTS_API_URL = 'https://facts.test/api'
    FETCH_TIMEOUT_SECONDS = 1
    PAGE_SIZE = 3
    INGEST_ON_STARTUP = False


CONFIG_BY_ENV = {
    'production': Config,
    'development': DevConfig,
    'test': TestConfig,
}
