import os
from dotenv import load_dotenv

load_dotenv()


def env_list(name, default):
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def env_flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Tenant detection
    MAIN_DOMAINS = env_list("MAIN_DOMAINS", "barbersmart.app,barbersmart.com.br")
    IGNORED_DOMAINS = env_list("IGNORED_DOMAINS", "localhost,127.0.0.1")
    TRUST_PROXY_HEADERS = env_flag("TRUST_PROXY_HEADERS")

    # System branding defaults (the lowest cascade layer)
    DEFAULT_SYSTEM_NAME = os.getenv("DEFAULT_SYSTEM_NAME", "BarberSmart")
    DEFAULT_TAGLINE = os.getenv("DEFAULT_TAGLINE", "Smart management for barbershops")
    SYSTEM_PRIMARY_COLOR = os.getenv("SYSTEM_PRIMARY_COLOR", "#d4a574")
    SYSTEM_SECONDARY_COLOR = os.getenv("SYSTEM_SECONDARY_COLOR", "#1a1a2e")
    SYSTEM_ACCENT_COLOR = os.getenv("SYSTEM_ACCENT_COLOR", "#c9a86c")
    ALLOW_TENANT_CUSTOMIZATION = env_flag("ALLOW_TENANT_CUSTOMIZATION", "true")

    # Fonts served locally instead of through Google Fonts
    LOCAL_FONTS = env_list("LOCAL_FONTS", "Posey Textured")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///landing-dev.db")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-at-least-32-bytes"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    MAIN_DOMAINS = ["barbersmart.app"]
    IGNORED_DOMAINS = ["localhost"]
    TRUST_PROXY_HEADERS = False
    ALLOW_TENANT_CUSTOMIZATION = True


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
