import os
from dotenv import load_dotenv

load_dotenv()


def _csv(value):
    return tuple(item.strip() for item in value.split(",") if item.strip())


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Draft mode / editor token
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_COOKIE_CSRF_PROTECT = True
    JWT_CSRF_CHECK_FORM = True
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_ACCESS_COOKIE_PATH = "/"
    DRAFT_MODE_SECRET = os.getenv("DRAFT_MODE_SECRET")

    # Sanity
    SANITY_PROJECT_ID = os.getenv("SANITY_PROJECT_ID")
    SANITY_DATASET = os.getenv("SANITY_DATASET", "production")
    SANITY_API_VERSION = os.getenv("SANITY_API_VERSION", "2024-01-01")
    SANITY_API_TOKEN = os.getenv("SANITY_API_TOKEN")
    SANITY_STUDIO_URL = os.getenv("SANITY_STUDIO_URL", "http://localhost:3333")
    CMS_TIMEOUT = float(os.getenv("CMS_TIMEOUT", "10"))

    # Contact form
    RESEND_API_KEY = os.getenv("RESEND_API_KEY")
    CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "info@example.com")
    CONTACT_FROM = os.getenv("CONTACT_FROM", "Website <noreply@example.com>")
    EMAIL_TIMEOUT = float(os.getenv("EMAIL_TIMEOUT", "10"))

    # Page builder
    HIDDEN_SECTION_TYPES = _csv(os.getenv("HIDDEN_SECTION_TYPES", "statsSection"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///site-dev.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    JWT_COOKIE_SECURE = True


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    DRAFT_MODE_SECRET = "preview-secret"
    SANITY_PROJECT_ID = "testproj"
    SANITY_DATASET = "production"
    SANITY_STUDIO_URL = "https://studio.example.com"
    RESEND_API_KEY = None
    HIDDEN_SECTION_TYPES = ("statsSection",)


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
