import logging.config
import os
import sys


def configure_settings():
    """
    Configures logging for run_tests.py and the test suite.
    """
    log_level = os.environ.get('RRULE_ITERATOR_LOG_LEVEL', 'DEBUG')

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '[%(asctime)s %(levelname)s] %(name)s:%(lineno)d \'%(message)s\'',
            }
        },
        'handlers': {
            'console': {
                'level': log_level,
                'class': 'logging.StreamHandler',
                'stream': sys.stdout,
                'formatter': 'standard'
            }
        },
        'loggers': {
            'rrule_iterator': {
                'handlers': ['console'],
                'level': log_level,
                'propagate': True
            },
        }
    })
