"""Error handling utilities."""
import logging
from functools import wraps
from typing import Any, Callable, Optional

class HomepageError(Exception):
    """Base exception for the homepage builder."""
    def __init__(self, message: str, source: Optional[str] = None):
        self.message = message
        self.source = source
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} ({self.source})"
        return self.message

class BibliographyUnavailableError(HomepageError):
    """The bibliography could not be read or parsed."""

class ConfigError(HomepageError):
    """Invalid configuration value."""

def data_source_handler(func: Callable) -> Callable:
    """Decorator turning any failure of a bibliography read into BibliographyUnavailableError.

    The wrapped function must take the source location as its first argument.
    """
    @wraps(func)
    def wrapper(source: str, *args, **kwargs) -> Any:
        try:
            return func(source, *args, **kwargs)
        except BibliographyUnavailableError:
            raise
        except Exception as e:
            logging.error(f"Data source error in {func.__name__}: {str(e)}")
            raise BibliographyUnavailableError("Bibliography unavailable", source=source) from e
    return wrapper
