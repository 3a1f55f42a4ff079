# towercraft/logging_config.py
"""
Logging Configuration
Sets up the 'towercraft' logger for the command-line demo and the REST host.

Console output goes to stdout. A run log can also be written next to the
other run artifacts (CSV, PNG, HTML), by default artifacts/towercraft.log.
"""
import logging
import os
import sys
from typing import Optional

DEFAULT_LOG_FILE = os.path.join('artifacts', 'towercraft.log')

# Third-party loggers that flood DEBUG output while plotting
NOISY_LOGGERS = ('matplotlib', 'PIL')


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = DEFAULT_LOG_FILE,
) -> logging.Logger:
    """
    Configures the logger for the 'towercraft' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Path of the run log, or None for console only. Its
            directory is created if needed.

    Returns:
        The configured 'towercraft' logger.
    """
    logger = logging.getLogger("towercraft")
    logger.setLevel(level)

    # Re-running setup (demo reruns, app reloads) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.info("Logging initialized (level=%s, log file=%s)",
                logging.getLevelName(level), log_file or 'none')
    return logger
