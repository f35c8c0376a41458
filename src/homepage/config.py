"""Configuration settings."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Tuple

from dotenv import load_dotenv

from .models import SelfIdentity, VideoItem
from .utils.error_handling import ConfigError

# Load environment variables from .env file if it exists
load_dotenv()

def _env(name: str, default: str) -> str:
    return os.getenv(name, default)

def _env_number(name: str, default: str, cast: Callable[[str], Any]) -> Any:
    value = _env(name, default)
    try:
        return cast(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}") from None

@dataclass
class Config:
    """Configuration settings for the homepage builder."""

    # File paths
    SITE_ROOT: str = field(default_factory=lambda: _env("HOMEPAGE_SITE_ROOT", "."))
    BIB_PATH: str = field(default_factory=lambda: _env("HOMEPAGE_BIB_PATH", "static/pub.bib"))
    THUMBNAIL_PATH: str = field(default_factory=lambda: _env("HOMEPAGE_THUMBNAIL_PATH", "static/thumbnail/"))
    ANIMATION_PATH: str = field(default_factory=lambda: _env("HOMEPAGE_ANIMATION_PATH", "./static/ani/"))
    OUTPUT_FILE: str = field(default_factory=lambda: _env("HOMEPAGE_OUTPUT", "index.html"))

    # Page owner
    MY_GIVEN_NAME: str = field(default_factory=lambda: _env("HOMEPAGE_GIVEN_NAME", "Zexuan"))
    MY_SURNAME: str = field(default_factory=lambda: _env("HOMEPAGE_SURNAME", "Wu"))

    # Rendering
    MAX_DISPLAY_AUTHORS: int = field(default_factory=lambda: _env_number("HOMEPAGE_MAX_AUTHORS", "5", int))
    PAGE_TITLE: str = field(default_factory=lambda: _env("HOMEPAGE_TITLE", "Publications"))

    # Network
    REQUEST_TIMEOUT: float = field(default_factory=lambda: _env_number("HOMEPAGE_TIMEOUT", "10", float))

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def self_identity(self) -> SelfIdentity:
        return SelfIdentity(given=self.MY_GIVEN_NAME, family=self.MY_SURNAME)

    @property
    def journal_aliases(self) -> Mapping[str, str]:
        return JOURNAL_ALIASES

    def validate(self) -> "Config":
        """Check numeric settings, returning self so calls can be chained."""
        if self.MAX_DISPLAY_AUTHORS < 1:
            raise ConfigError(f"MAX_DISPLAY_AUTHORS must be at least 1, got {self.MAX_DISPLAY_AUTHORS}")
        if self.REQUEST_TIMEOUT <= 0:
            raise ConfigError(f"REQUEST_TIMEOUT must be positive, got {self.REQUEST_TIMEOUT}")
        return self

    def is_remote_bibliography(self) -> bool:
        return self.BIB_PATH.startswith(("http://", "https://"))

    def get_bib_source(self) -> str:
        """Get the bibliography location, resolving local paths against SITE_ROOT."""
        if self.is_remote_bibliography() or os.path.isabs(self.BIB_PATH):
            return self.BIB_PATH
        return str(Path(self.SITE_ROOT) / self.BIB_PATH)

    def get_output_path(self) -> Path:
        """Get the full path to the generated HTML page."""
        return Path(self.SITE_ROOT) / self.OUTPUT_FILE

    def get_static_folder(self) -> str:
        return str(Path(self.SITE_ROOT).resolve() / "static")

# AAS journal macros as exported by ADS, mapped to display markup
JOURNAL_ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    "\\aj": "<i>AJ</i>",
    "\\apj": "<i>ApJ</i>",
    "\\apjl": "<i>ApJL</i>",
    "\\apjs": "<i>ApJS</i>",
    "\\aap": "<i>A&A</i>",
    "\\aaps": "<i>A&AS</i>",
    "\\mnras": "<i>MNRAS</i>",
    "\\pasp": "<i>PASP</i>",
    "\\araa": "<i>ARA&A</i>",
    "\\nat": "<i>Nature</i>",
    "\\sci": "<i>Science</i>",
    "arXiv e-prints": "<i>arXiv e-prints</i>",
})

VIDEOS_GENERAL: Final[Tuple[VideoItem, ...]] = (
    VideoItem(title="Free-floating Planet event", src="ffp_art.mp4"),
    VideoItem(title="Single-lens event", src="pspl.mp4"),
    VideoItem(title="Binary-lens event ASASSN-22av", src="22av.mp4"),
)

VIDEOS_FFP: Final[Tuple[VideoItem, ...]] = (
    VideoItem(title="FFP: Earth-like lens + Sun-like source", src="1Me_1Rsun_murel5.0_Dl6.mp4"),
    VideoItem(title="FFP: Earth-like lens + Giant source", src="1Me_10Rsun_murel5.0_Dl6.mp4"),
    VideoItem(title="FFP: Neptune-like lens + Sun-like source", src="10Me_1Rsun_murel5.0_Dl6.mp4"),
    VideoItem(title="FFP: Neptune-like lens + Giant source", src="10Me_10Rsun_murel5.0_Dl6.mp4"),
)
