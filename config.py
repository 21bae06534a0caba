import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("CONFIG_FILE_PATH", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    """Environment variable (raw string) wins over env.yaml, env.yaml wins over the default"""
    if key in os.environ:
        return os.environ[key]
    value = data.get(key)
    return default if value is None else value


def _bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _list(value) -> list:
    """Lists come from yaml as lists and from the environment comma separated"""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./todo.db")
    REDIS_URL = _get("REDIS_URL", "redis://localhost:6379/0")
    REDIS_PASSWORD = _get("REDIS_PASSWORD", None)
    CACHE_BACKEND = _get("CACHE_BACKEND", "redis")
    API_PREFIX = _get("API_PREFIX", "/api/v1")
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _list(_get("CORS_ORIGINS", ["http://localhost:5173"]))
    CORS_ALLOW_CREDENTIALS = _bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    AUTO_CREATE_TABLES = _bool(_get("AUTO_CREATE_TABLES", True))
    JWT_SECRET = str(_get("JWT_SECRET", "dev-secret-key-change-in-production"))
    JWT_ISSUER = str(_get("JWT_ISSUER", "todo-api"))
    JWT_ACCESS_TOKEN_EXP_HOUR = int(_get("JWT_ACCESS_TOKEN_EXP_HOUR", 24))
    BCRYPT_ROUNDS = int(_get("BCRYPT_ROUNDS", 12))
    SESSION_COOKIE_NAME = _get("SESSION_COOKIE_NAME", "session_id")
    SESSION_COOKIE_SECURE = _bool(_get("SESSION_COOKIE_SECURE", False))
