# logs.py
"""Contains the bot logger"""

import logging
import os


logger = logging.getLogger('classicdb_bot')


def _has_file_handler(log: logging.Logger, log_file: str) -> bool:
    return any(isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file
               for handler in log.handlers)


def setup_logging(log_file: str, debug_mode: bool = False) -> None:
    """Writes the discord and bot loggers to a log file. Loggers already writing to that file are left as they are."""
    log_file = os.path.abspath(log_file)
    level = logging.DEBUG if debug_mode else logging.INFO
    handler = None
    for log in (logging.getLogger('discord'), logger):
        log.setLevel(level)
        if _has_file_handler(log, log_file): continue
        if handler is None:
            os.makedirs(os.path.dirname(log_file), exist_ok=True)
            handler = logging.FileHandler(filename=log_file, encoding='utf-8', mode='a')
            handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
        log.addHandler(handler)
