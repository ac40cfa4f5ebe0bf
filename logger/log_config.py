# logger/log_config.py

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s [%(levelname)s] %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

# Sub-loggers that must propagate into 'vmctl'
SUB_LOGGERS = [
    'vmctl.commands', 'vmctl.config', 'vmctl.vcenter', 'vmctl.output',
]


def setup_logger(verbose=False, stream=None):
    """
    Configures the main 'vmctl' logger.

    Console output goes to stderr so that stdout only carries command results.
    Other modules should use `logging.getLogger('vmctl.<area>')`.

    :param verbose: Log DEBUG and above instead of WARNING and above.
    :param stream: Override the output stream (defaults to sys.stderr).
    """
    logger = logging.getLogger('vmctl')
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Prevents duplicates if called multiple times.
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    # 'vmctl' is top-level
    logger.propagate = False

    for name in SUB_LOGGERS:
        sub_logger = logging.getLogger(name)
        sub_logger.setLevel(logging.NOTSET)
        sub_logger.propagate = True
        for h in list(sub_logger.handlers):
            sub_logger.removeHandler(h)

    return logger
