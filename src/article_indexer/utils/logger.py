import logging
import sys
from pathlib import Path
from typing import Union
from article_indexer.errors import ConfigError


def resolve_level(level: Union[str, int]) -> int:
  """Numeric log level for a name like "info"; ConfigError if unknown"""
  if isinstance(level, bool):
    raise ConfigError(f"Unknown log level: {level!r}")
  if isinstance(level, int):
    return level
  resolved = logging.getLevelName(str(level).strip().upper())
  if not isinstance(resolved, int):
    raise ConfigError(f"Unknown log level: {level!r}")
  return resolved


def setup_logger(
  name: str = "article_indexer",
  log_file: str = "logs/indexer.log",
  level: Union[str, int] = "INFO"
):
  """
  Console + file logger setup

  Args:
    name: Logger name
    log_file: Path to log file
    level: Log level (DEBUG, INFO, WARNING, ERROR)
  """
  numeric_level = resolve_level(level)

  log_path = Path(log_file)
  try:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding='utf-8')
  except OSError as e:
    raise ConfigError(f"Cannot open log file {log_file}: {e}") from e

  logger = logging.getLogger(name)
  logger.setLevel(numeric_level)

  # Drop handlers from an earlier setup
  for handler in list(logger.handlers):
    handler.close()
    logger.removeHandler(handler)

  # Console handler
  console_handler = logging.StreamHandler(sys.stdout)
  console_format = logging.Formatter(
    "%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
  )
  console_handler.setFormatter(console_format)
  logger.addHandler(console_handler)

  # File handler
  file_format = logging.Formatter(
    "%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(threadName)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
  )
  file_handler.setFormatter(file_format)
  logger.addHandler(file_handler)

  return logger

# Global logger instance
logger = logging.getLogger("article_indexer")
