import logging
import sys
from logging import Filter, LogRecord

from uvicorn.logging import DefaultFormatter

from meetshare.env import log_level

log_format = '%(asctime)s %(name)s %(levelprefix)s %(message)s'

# http clients used by the completion provider log every request at debug level
quiet_loggers = ('httpcore', 'httpx', 'openai')


# Drops access log lines for exclude_paths
class AccessLogSuppressor(Filter):
    exclude_paths = ('/favicon.ico', '/metrics', '/healthz')

    def filter(self, record: LogRecord) -> bool:
        log_msg = record.getMessage()

        return not any(f'{excluded} ' in log_msg for excluded in self.exclude_paths)


def mask_secret(secret: str | None) -> str:
    if not secret:
        return 'NOT SET'

    return f'{secret[:5]}...'


def setup_logging():
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(DefaultFormatter(log_format))

    logging.basicConfig(level=log_level, handlers=[sh])

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(logging.WARNING, logging.getLevelName(log_level)))


def get_logger(name):
    return logging.getLogger(name)


setup_logging()


# Modified from the defaults in uvicorn.config.LOGGING_CONFIG
uvicorn_log_config = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            '()': 'uvicorn.logging.DefaultFormatter',
            'fmt': log_format,
            'use_colors': None,
        },
        'access': {
            '()': 'uvicorn.logging.AccessFormatter',
            'fmt': '%(asctime)s %(name)s %(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s',
        },
    },
    'filters': {
        'suppress_noise': {'()': 'meetshare.logs.AccessLogSuppressor'},
    },
    'handlers': {
        'default': {'formatter': 'default', 'class': 'logging.StreamHandler', 'stream': 'ext://sys.stdout'},
        'access': {
            'formatter': 'access',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
            'filters': ['suppress_noise'],
        },
    },
    'loggers': {
        'uvicorn': {'handlers': ['default'], 'level': log_level, 'propagate': False},
        'uvicorn.error': {'level': log_level},
        'uvicorn.access': {'handlers': ['access'], 'level': log_level, 'propagate': False},
    },
}
