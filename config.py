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
    ENV = data.get("ENV", "development")
    VERSION = data.get("VERSION", "1.0.0")

    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./fitness.db")
    DB_CREATE_TABLES = bool(data.get("DB_CREATE_TABLES", True))
    DB_QUERY_TIMEOUT = float(data.get("DB_QUERY_TIMEOUT", 3))

    API_PREFIX = data.get("API_PREFIX", "/v1")
    API_PORT = data.get("API_PORT", 4000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    MAX_BODY_BYTES = int(data.get("MAX_BODY_BYTES", 1_048_576))

    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)

    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    LOG_JSON = bool(data.get("LOG_JSON", True))

    LIMITER_ENABLED = bool(data.get("LIMITER_ENABLED", True))
    LIMITER_RPS = float(data.get("LIMITER_RPS", 2))
    LIMITER_BURST = int(data.get("LIMITER_BURST", 4))
    LIMITER_IDLE_TIMEOUT = float(data.get("LIMITER_IDLE_TIMEOUT", 180))
    LIMITER_SWEEP_INTERVAL = float(data.get("LIMITER_SWEEP_INTERVAL", 60))

    SMTP_HOST = data.get("SMTP_HOST", "sandbox.smtp.mailtrap.io")
    SMTP_PORT = data.get("SMTP_PORT", 25)
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_SENDER = data.get("SMTP_SENDER", "Fitness <no-reply@fitness.local>")
    SMTP_TIMEOUT = float(data.get("SMTP_TIMEOUT", 5))

    ACTIVATION_TOKEN_TTL_HOURS = data.get("ACTIVATION_TOKEN_TTL_HOURS", 24)
    AUTHENTICATION_TOKEN_TTL_HOURS = data.get("AUTHENTICATION_TOKEN_TTL_HOURS", 24)
    DEFAULT_PERMISSIONS = data.get("DEFAULT_PERMISSIONS", ["records:read"])

    SHUTDOWN_TIMEOUT = float(data.get("SHUTDOWN_TIMEOUT", 20))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "")
