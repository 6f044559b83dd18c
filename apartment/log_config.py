import copy
import logging.config

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "standard"},
    },
    "loggers": {
        "apartment": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}


def configure_logging(level: str = "INFO") -> None:
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["apartment"]["level"] = level.upper()
    logging.config.dictConfig(config)
