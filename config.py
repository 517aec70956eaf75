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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production-0123")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_ISSUER = data.get("JWT_ISSUER", "auth-core")
    JWT_AUDIENCE = data.get("JWT_AUDIENCE", "api")
    ACCESS_TOKEN_TTL_MINUTES = data.get("ACCESS_TOKEN_TTL_MINUTES", 15)
    REFRESH_TOKEN_TTL_DAYS = data.get("REFRESH_TOKEN_TTL_DAYS", 7)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)
    STORE_TIMEOUT_SECONDS = data.get("STORE_TIMEOUT_SECONDS", 5)
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")


def validate_auth_config(config) -> None:
    """
    Reject auth settings the token service cannot run safely with.

    Raises:
        ValueError: describing the first violated rule
    """
    if not config.JWT_SECRET:
        raise ValueError("JWT secret cannot be empty")
    if len(config.JWT_SECRET) < 32:
        raise ValueError("JWT secret must be at least 32 characters long")
    if config.ACCESS_TOKEN_TTL_MINUTES <= 0:
        raise ValueError("access token TTL must be positive")
    if config.REFRESH_TOKEN_TTL_DAYS <= 0:
        raise ValueError("refresh token TTL must be positive")
    if config.REFRESH_TOKEN_TTL_DAYS * 24 * 60 <= config.ACCESS_TOKEN_TTL_MINUTES:
        raise ValueError("refresh token TTL must be greater than access token TTL")
