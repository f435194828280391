import os


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-prod')

    # Admin credentials (HTTP Basic)
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin')

    # Registry
    MAX_NUMBER_OF_USERS = int(os.getenv('MAX_NUMBER_OF_USERS', '3'))
    PASSWORD_LENGTH = int(os.getenv('PASSWORD_LENGTH', '12'))
    PASSWORD_HASH_METHOD = os.getenv('PASSWORD_HASH_METHOD', 'scrypt')

    # Largest accepted request body, CSV imports included
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', str(1024 * 1024)))

    # Redis (optional, enables event publishing)
    REDIS_URL = os.getenv('REDIS_URL', '')

    # Player servers
    NOTIFY_PLAYER_SERVERS = os.getenv('NOTIFY_PLAYER_SERVERS', 'true').lower() == 'true'
    PLAYER_SERVER_TIMEOUT = float(os.getenv('PLAYER_SERVER_TIMEOUT', '2'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin'
    MAX_NUMBER_OF_USERS = 3
    # Cheap hashing keeps the suite fast
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    REDIS_URL = ''
    NOTIFY_PLAYER_SERVERS = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
