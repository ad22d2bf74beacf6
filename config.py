import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./sentinel.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60))
    # Calendar days and login windows are evaluated in this zone
    TIMEZONE = data.get("TIMEZONE", "UTC")
    ROOT_ADMIN_EMAIL = data.get("ROOT_ADMIN_EMAIL", "root@sentinel.example.com")
    ROOT_ADMIN_PASSWORD = data.get("ROOT_ADMIN_PASSWORD", "change-me-root")
    ROOT_ADMIN_NAME = data.get("ROOT_ADMIN_NAME", "Root Administrator")
    TOTP_ISSUER = data.get("TOTP_ISSUER", "SecureAccessSentinel")
    FACE_MATCH_THRESHOLD = float(data.get("FACE_MATCH_THRESHOLD", 0.5))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
