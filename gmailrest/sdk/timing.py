import time
import logging
from functools import wraps

logger = logging.getLogger(__name__)

def time_api_call(func):
    """A decorator to time HTTP calls and log the duration with the method and URL."""
    @wraps(func)
    def wrapper(self, method, url, *args, **kwargs):
        start_time = time.perf_counter()
        result = func(self, method, url, *args, **kwargs)
        duration = time.perf_counter() - start_time
        logger.debug(f"{method} {url} took {duration:.4f} seconds.")
        return result
    return wrapper
