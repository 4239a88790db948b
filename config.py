import os


def normalize_database_url(url):
    """Rewrite driver-less URLs to the SQLAlchemy dialects we ship with"""
    if not url:
        return url
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+pymysql://", 1)
    return url


class Config:
    """Base configuration"""

    # Server Settings
    HOST = '0.0.0.0'
    PORT = 8080
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database Settings
    SQLALCHEMY_DATABASE_URI = normalize_database_url(
        os.environ.get('DB_URL') or os.environ.get('DATABASE_URL'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # The portfolio has exactly one profile row
    PROFILE_ID = 1

    # CORS Settings
    CORS_ORIGINS = [
        'http://localhost:3000',
        'http://localhost:3001',
        'http://www.propcloud.fun',
    ]
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    CORS_HEADERS = ['Content-Type', 'Authorization']

    # Contact Notification Settings
    CONTACT_TELEGRAM_BOT_TOKEN = os.environ.get('CONTACT_TELEGRAM_BOT_TOKEN')
    CONTACT_TELEGRAM_CHAT_ID = os.environ.get('CONTACT_TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    CONTACT_TELEGRAM_BOT_TOKEN = None
    CONTACT_TELEGRAM_CHAT_ID = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
