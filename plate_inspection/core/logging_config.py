import logging.config


def setup_logging(level: str = "INFO"):
    """Setup logging configuration"""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "plate_inspection": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    })

    return logging.getLogger("plate_inspection")
