"""Render the full homepage from the packaged template."""
import logging
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .bibliography import load_bibliography
from .config import VIDEOS_FFP, VIDEOS_GENERAL, Config
from .formatting import PublicationFormatter
from .gallery import render_video_row
from .models import BibliographicRecord
from .utils.error_handling import BibliographyUnavailableError
from .utils.logging_setup import log_operation

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "<p>Error loading publications. Please try again later.</p>"

_env = Environment(
    loader=PackageLoader("homepage", "templates"),
    autoescape=select_autoescape(["html"]),
)

def render_page(config: Config, records: Optional[List[BibliographicRecord]] = None,
                error: Optional[BibliographyUnavailableError] = None) -> str:
    """Render the page for already loaded records.

    When ``error`` is given, or no records were supplied, the publication
    section shows the error message instead of cards.
    """
    if error is not None or records is None:
        publications = ERROR_MESSAGE
    else:
        publications = PublicationFormatter(config).render_publications(records)

    template = _env.get_template("index.html")
    return template.render(
        title=config.PAGE_TITLE,
        publications=Markup(publications),
        videos_general=Markup(render_video_row(VIDEOS_GENERAL, config.ANIMATION_PATH)),
        videos_ffp=Markup(render_video_row(VIDEOS_FFP, config.ANIMATION_PATH)),
    )

def build_page(config: Config) -> str:
    """Load the bibliography and render the page, falling back to the error message."""
    source = config.get_bib_source()
    try:
        records = load_bibliography(source, timeout=config.REQUEST_TIMEOUT)
    except BibliographyUnavailableError as e:
        logger.error(f"Error loading bibtex: {e}")
        return render_page(config, error=e)

    log_operation("Build", f"{len(records)} publications from {source}")
    return render_page(config, records=records)

def write_page(config: Config, output: Optional[str] = None) -> Path:
    """Render the page and write it to disk as UTF-8."""
    path = Path(output) if output else config.get_output_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_page(config), encoding="utf-8")
    log_operation("Write", str(path))
    return path
