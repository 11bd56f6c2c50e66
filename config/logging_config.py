import logging
import logging.config
from config.main_config import LOG_FILE, LOG_LEVEL


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Set default user if not provided
        return True
    

def _logger(handlers):
    return {
        'handlers': handlers,
        'level': LOG_LEVEL,
        'propagate': False,
    }


logging_config = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
        },
    },
    'filters': {
        'user_filter': {
            '()': UserFilter,
        },
    },
    'handlers': {
        'file': {
            'level': LOG_LEVEL,
            'class': 'logging.FileHandler',
            'filename': LOG_FILE,
            'formatter': 'standard',
            'filters': ['user_filter'],
            'delay': True,
        },
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['user_filter']
        },
    },
    'loggers': {
        'use_cases': _logger(['file', 'console']),
        'handlers': _logger(['file', 'console']),
        'external_apis': _logger(['file', 'console']),
        'repositories': _logger(['file', 'console']),
        '': {  
            'handlers': ['file', 'console'],
            'level': LOG_LEVEL,
            'propagate': True,
        }
    }
}


def setup_logging():
    logging.config.dictConfig(logging_config)
