import logging
from functools import wraps
from typing import Callable

from markmap_extractor.types import ExtractionResponse

logger = logging.getLogger(__name__)


def failure_response(func: Callable[..., ExtractionResponse]) -> Callable[..., ExtractionResponse]:
    """Decorator turning any exception into a failure response."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> ExtractionResponse:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {str(e)}")
            return {"success": False, "error": str(e)}
    return wrapper
