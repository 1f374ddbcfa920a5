"""
Logging setup for the e-voting service.

Everything goes through loguru: standard logging records (uvicorn,
fastapi, the crypto modules) are forwarded by InterceptHandler, and
election events get their own ELECTION level.
"""

import json
import logging
import sys

from loguru import logger

from evoting.election.enums import ElectionEventEnum

ELECTION_LEVEL = "ELECTION"

FORWARDED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


def register_election_level():
    try:
        logger.level(ELECTION_LEVEL)
    except ValueError:
        logger.level(ELECTION_LEVEL, no=35, color="<magenta>", icon="")


register_election_level()


class InterceptHandler(logging.Handler):
    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # skip the frames of the logging module itself
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


class CustomizeLogger:
    @classmethod
    def make_logger(cls, config_path):
        """
        Replaces the loguru sinks with the ones described in the
        "logger" section of the json file at config_path.
        """
        with open(config_path) as config_file:
            config = json.load(config_file)["logger"]

        level = config["level"].upper()
        logger.remove()
        register_election_level()
        logger.add(sys.stdout, enqueue=True, backtrace=True, level=level, format=config["format"])
        if config.get("path"):
            logger.add(
                str(config["path"]),
                rotation=config.get("rotation"),
                retention=config.get("retention"),
                enqueue=True,
                backtrace=True,
                level=level,
                format=config["format"],
            )

        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
        for name in FORWARDED_LOGGERS:
            logging.getLogger(name).handlers = [InterceptHandler()]

        return logger


class ElectionLogger(object):
    """
    Customized logger for election lifecycle events.

    Events go to loguru at the ELECTION level, with the election id,
    the event and its parameters bound to the record.
    """

    _level_to_name = {
        logging.CRITICAL: 'CRITICAL',
        logging.ERROR: 'ERROR',
        logging.WARNING: 'WARNING',
        logging.INFO: 'INFO',
        logging.DEBUG: 'DEBUG',
        logging.NOTSET: 'NOTSET',
    }

    def _log(self, level, election_id, event: ElectionEventEnum, **kwargs):
        event_params = json.dumps(kwargs, sort_keys=True, default=str)
        logger.bind(
            election_id=election_id,
            event=event.value,
            event_level=self._level_to_name[level],
            event_params=kwargs,
        ).log(ELECTION_LEVEL, "election {} | {} | {}", election_id, event.value, event_params)

    def warning(self, election_id, event: ElectionEventEnum, **kwargs):
        self._log(logging.WARNING, election_id, event, **kwargs)

    def info(self, election_id, event: ElectionEventEnum, **kwargs):
        self._log(logging.INFO, election_id, event, **kwargs)


election_logger = ElectionLogger()
