from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env

LOG_LEVEL_KEY = "ARITHMETIC_LOG_LEVEL"
LOG_DIR_KEY = "ARITHMETIC_LOG_DIR"


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def log_level_from_env(default: str = "INFO") -> str:
    """Log level name configured for the CLI."""
    return (env_get(LOG_LEVEL_KEY, default) or default).upper()


def log_dir_from_env(default: str = "logs") -> str:
    """Directory for the daily log file."""
    return env_get(LOG_DIR_KEY, default) or default
