"""Academic homepage builder."""
from .config import Config
from .formatting import format_author_list, resolve_venue_alias

__version__ = "1.0.0"
__all__ = ["Config", "format_author_list", "resolve_venue_alias"]
