import logging
from datetime import datetime
from pathlib import Path

from src.coreutils.env import log_dir_from_env


def resolve_level(level: int | str) -> int:
    """Turn a level name like "DEBUG" into its numeric value"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level=logging.INFO, log_dir: str | None = None):
    """Setup basic logging configuration"""
    log_path = Path(log_dir or log_dir_from_env())
    log_path.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(
                log_path / f"arithmetic_{datetime.now().strftime('%Y-%m-%d')}.log"
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger(__name__)


def log_function_call(func_name: str, **kwargs):
    """Log function calls with parameters"""
    logger = logging.getLogger(__name__)
    logger.info(f"Calling {func_name} with params: {kwargs}")
