import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # How long a SQLite writer waits for the database lock
    SQLITE_BUSY_TIMEOUT_MS = int(os.getenv("SQLITE_BUSY_TIMEOUT_MS", 30000))

    # Position management limits
    MAX_SECTIONS_PER_PORTFOLIO = int(os.getenv("MAX_SECTIONS_PER_PORTFOLIO", 10))
    MAX_COMPONENTS_PER_SCOPE = int(os.getenv("MAX_COMPONENTS_PER_SCOPE", 15))
    # "section" caps components per section, "portfolio" caps them across the portfolio
    COMPONENT_LIMIT_SCOPE = os.getenv("COMPONENT_LIMIT_SCOPE", "section")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///folio-dev.db")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAX_SECTIONS_PER_PORTFOLIO = 10
    MAX_COMPONENTS_PER_SCOPE = 15
    COMPONENT_LIMIT_SCOPE = "section"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
