import os


def _database_uri():
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    host = os.environ.get('POSTGRES_HOST')
    if host:
        # المنفذ ثابت على المنفذ الافتراضي لـ PostgreSQL
        return 'postgresql://{user}:{password}@{host}:5432/{database}'.format(
            user=os.environ.get('POSTGRES_USER', ''),
            password=os.environ.get('POSTGRES_PASSWORD', ''),
            host=host,
            database=os.environ.get('POSTGRES_DATABASE', ''),
        )
    return 'sqlite:///invoices.db'


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your_secret_key_here'
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}
    BABEL_DEFAULT_LOCALE = 'en_US'
    CURRENCY = 'USD'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    INVOICE_LISTING_CACHE_SIZE = int(os.environ.get('INVOICE_LISTING_CACHE_SIZE', 64))


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
