import uvicorn
from office_templates.utils.logging_formatters import ACCESS_FMT, DATE_FMT, DEFAULT_FMT

log_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": "office_templates.utils.logging_formatters.ColorFormatter",
            "format": DEFAULT_FMT,
            "datefmt": DATE_FMT,
        },
        "access": {
            "()": "office_templates.utils.logging_formatters.ColorAccessFormatter",
            "format": ACCESS_FMT,
            "datefmt": DATE_FMT,
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
        "access": {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
        # reload watcher is noisy at INFO
        "watchfiles": {"level": "WARNING", "propagate": False, "handlers": []},
        "watchfiles.main": {"level": "WARNING", "propagate": False, "handlers": []},
    },
}

if __name__ == "__main__":
    uvicorn.run("office_templates.main:app", host="0.0.0.0", port=8080, reload=True,
                access_log=True, log_config=log_config)
