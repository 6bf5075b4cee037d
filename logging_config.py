import logging
import os
from logging.handlers import RotatingFileHandler

LOGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")
DEFAULT_LOG_FILE = "object_manager.log"
LOG_FORMAT = (
    "%(asctime)s %(levelname)-8s "
    "[%(filename)s:%(lineno)d %(funcName)s()] "
    "%(message)s"
)


def setup_logging(name="object_manager", log_file=DEFAULT_LOG_FILE, level=logging.INFO, max_bytes=5*1024*1024, backup_count=3):
    """Set up a logger with a rotating file handler and a stream handler.

    Log files land in the project's ./logs/ directory unless an absolute
    path is provided (e.g. tests using tmpdir).

    Args:
        name: The name of the logger.
        log_file: The name of the log file.
        level: The level of the logger, as an int or a level name ("DEBUG").
        max_bytes: The maximum size of the log file.
        backup_count: The number of backup log files.

    Returns:
        logger: The logger object.

    Example usage:
    from logging_config import setup_logging
    logger = setup_logging(__name__)
    """
    logger = logging.getLogger(name)
    # Clear existing handlers to avoid duplicate logs
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if os.path.isabs(log_file):
        log_path = log_file
    else:
        os.makedirs(LOGS_DIR, exist_ok=True)
        log_path = os.path.join(LOGS_DIR, os.path.basename(log_file))

    file_handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    return logger
