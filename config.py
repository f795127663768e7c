import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./catalog.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_BASE_URL = data.get("API_BASE_URL", "http://localhost:8000/api")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Sessions
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_MINUTES = data.get("JWT_EXPIRES_MINUTES", 60 * 24)
    JWT_REMEMBER_EXPIRES_DAYS = data.get("JWT_REMEMBER_EXPIRES_DAYS", 30)

    # Confirmation / reset lifecycle
    CHALLENGE_EXPIRES_MINUTES = data.get("CHALLENGE_EXPIRES_MINUTES", 10)
    RESEND_THROTTLE_MINUTES = data.get("RESEND_THROTTLE_MINUTES", 3)
    SIGNUP_DEFAULT_ROLE = data.get("SIGNUP_DEFAULT_ROLE", 2)

    # Mail
    MAIL_BACKEND = data.get("MAIL_BACKEND", "log")
    MAIL_FROM = data.get("MAIL_FROM", "no-reply@cto.local")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))

    # Uploaded files
    PUBLIC_DIR = data.get("PUBLIC_DIR", os.path.join(ROOT_PATH, "public"))
    PUBLIC_URL = data.get("PUBLIC_URL", "http://localhost:8000/public")

    # Admin accounts seeded on startup: [{"email": ..., "password": ...}]
    ADMINS = data.get("ADMINS", [])
