import os

from .config import db_config_from_env, log_categories_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="root")

DEBUG = True
TESTING = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_CATEGORIES = log_categories_from_env()
