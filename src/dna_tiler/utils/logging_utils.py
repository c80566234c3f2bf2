import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
from datetime import datetime

# Default log directory
DEFAULT_LOG_DIR = Path("var/log")

# Root of every module logger in the package.
PACKAGE_LOGGER = "dna_tiler"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_log_file_path(module_name: str, log_dir: Optional[Path] = None) -> Path:
    """
    Timestamped log file path for one CLI run, e.g. ``var/log/dna_tiler_20261019_020718.log``.

    The directory is created if it does not exist.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"{module_name.replace('.', '_')}_{timestamp}.log"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = False,
) -> logging.Logger:
    """
    Configures a logger with a console handler and an optional file handler.

    Console output goes to stderr by default, leaving stdout to the
    alignment report or JSON document. Existing handlers are removed and
    closed first, so calling this once per CLI run is safe.

    Parameters
    ----------
    name : str, optional
        Logger name, by default the package root so all module loggers propagate to it.
    level : int, optional
        Level for the logger and its handlers, by default `logging.INFO`.
    stream : Optional[TextIO], optional
        Console stream. Defaults to `sys.stderr` at call time.
    log_file : Optional[str], optional
        Explicit log file path.
    log_dir : Optional[Path], optional
        Directory of the generated log file when `log_file` is not given.
    enable_file_logging : bool, optional
        If True and `log_file` is not given, also write to a timestamped file in `log_dir`.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
    elif enable_file_logging:
        log_path = get_log_file_path(name, log_dir=log_dir)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    set_log_level(logger, level)
    if log_path is not None:
        logger.info(f"Logging to file: {log_path}")

    return logger


def set_log_level(logger: logging.Logger, level: int) -> None:
    """Updates the level of a logger and all its handlers."""
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
