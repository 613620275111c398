import logging
from pathlib import Path

from order_events.config import settings


def get_logger(name: str, level=None, log_dir=None) -> logging.Logger:
    """Get a named logger with standard formatting.

    Example:
        logger = get_logger(__name__)
        logger.info("event rejected: %s", err)

    ``level`` and ``log_dir`` default to the values from ``order_events.config``.
    File logging is only enabled when a log directory is configured.

    Returns:
        logging.Logger: Configured logger instance.
    """
    if level is None:
        level = settings.log_level
    if log_dir is None:
        log_dir = settings.log_dir

    logger = logging.getLogger(name)

    # avoid adding duplicate handlers if called repeatedly (common in tests)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    formatter = logging.Formatter(
        '%(asctime)s     || %(name)s \n%(levelname)s   || %(message)s \n',
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_dir:
        logs_dir = Path(log_dir)
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            # unwritable log dir: keep streaming only
            logger.warning("cannot create log directory %s, file logging disabled", logs_dir)
        else:
            filehandler = logging.FileHandler(str(logs_dir / f"{name}.log"), encoding="utf-8")
            filehandler.setFormatter(formatter)
            logger.addHandler(filehandler)

    logger.setLevel(level)
    # stop passing records to the root logger (avoid duplicated messages)
    logger.propagate = False

    logger.debug("'%s' initialized with level %s", name, logging.getLevelName(level))
    return logger
