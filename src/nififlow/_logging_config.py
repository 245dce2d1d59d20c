# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Opt-in logging setup for applications using the client.

Handlers are attached to the 'nififlow' package logger (not root) and are named, so that calling
'init_basic_logging' again reconfigures the handlers it installed before instead of stacking new ones.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

PACKAGE_LOGGER = "nififlow"
CONSOLE_HANDLER_NAME = "nififlow.console"
FILE_HANDLER_NAME = "nififlow.file"

CLIENT_LOG_FILE = "nififlow_client.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5

CONSOLE_LOG_FORMAT = "%(asctime)s - %(name)-13s: %(levelname)-8s %(message)s"
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init_basic_logging(log_dir=None, enable_console_logging=True, level=logging.INFO) -> logging.Logger:
    """Configure the package logger.

    Console output (stdout) goes out at 'level'. When 'log_dir' is given, a rotating file handler also records
    everything from DEBUG up (request/response traces of the call layer). Returns the package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if log_dir else level)

    console = _find_handler(logger, CONSOLE_HANDLER_NAME)
    if enable_console_logging:
        if console is None:
            console = logging.StreamHandler(sys.stdout)
            console.set_name(CONSOLE_HANDLER_NAME)
            console.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
            logger.addHandler(console)
        console.setLevel(level)
    elif console is not None:
        _remove_handler(logger, console)

    file_handler = _find_handler(logger, FILE_HANDLER_NAME)
    log_file = Path(log_dir).absolute() / CLIENT_LOG_FILE if log_dir else None
    if file_handler is not None and (log_file is None or Path(file_handler.baseFilename) != log_file):
        _remove_handler(logger, file_handler)
        file_handler = None
    if log_file is not None and file_handler is None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_file), maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def _find_handler(logger, name):
    return next((handler for handler in logger.handlers if handler.get_name() == name), None)


def _remove_handler(logger, handler):
    logger.removeHandler(handler)
    handler.close()
