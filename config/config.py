import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "presence-dev-secret"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "presence_db")

    # Dev helpers
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    AUTO_SEED_DB = bool(int(os.environ.get("AUTO_SEED_DB", "0")))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def db_config_from_env(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", Config.DB_HOST),
        "port": int(os.getenv("DB_PORT", str(Config.DB_PORT))),
        "user": os.getenv("DB_USER", Config.DB_USER),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", Config.DB_NAME),
    }
