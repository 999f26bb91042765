import os


def db_config_from_env(*, default_password: str = "", default_database: str = "generus_db") -> dict:
    """DB_CONFIG shared by every settings module; each env only changes defaults."""
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_database),
    }


def log_categories_from_env() -> list:
    raw = os.getenv("LOG_CATEGORIES", "")
    return [part.strip() for part in raw.split(",") if part.strip()]
