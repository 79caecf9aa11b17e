# logging package
from .logging_config import (
    setup_logging,
    get_logger,
    set_correlation_id,
    get_correlation_id,
    log_function_call
)

__all__ = [
    'setup_logging',
    'get_logger',
    'set_correlation_id',
    'get_correlation_id',
    'log_function_call'
]
