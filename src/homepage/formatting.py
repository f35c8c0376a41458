"""Citation formatting and publication card rendering."""
import html
import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from .config import Config
from .models import Author, BibliographicRecord, SelfIdentity

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISPLAY = 5
PLACEHOLDER_GIVEN = "--"
DOI_URL = "https://doi.org/"

def highlight(text: str) -> str:
    return f'<span class="highlight-name">{text}</span>'

def is_valid_author(author: Author) -> bool:
    """A displayable author has a real given name and is not a group name."""
    return bool(author.given) and author.given != PLACEHOLDER_GIVEN and not author.is_literal

def format_author_list(
    authors: Optional[Sequence[Author]],
    self_identity: SelfIdentity,
    max_display: int = DEFAULT_MAX_DISPLAY,
) -> str:
    """Format the author line of a publication card.

    Only valid authors are shown and counted. At most ``max_display`` names
    are listed, the page owner highlighted; the rest are summarised as
    ", and N authors." with the owner named if they were cut off.
    """
    if not authors:
        return ""

    valid_authors = [a for a in authors if is_valid_author(a)]
    if not valid_authors:
        return ""

    shown = valid_authors[:max_display]
    names = []
    for author in shown:
        name = html.escape(f"{author.given} {author.family or ''}".rstrip())
        names.append(highlight(name) if self_identity.matches(author) else name)

    result = ", ".join(names)

    if len(valid_authors) <= max_display:
        return result + "."

    remaining = len(valid_authors) - max_display
    if any(self_identity.matches(a) for a in shown):
        return result + f", and {remaining} authors."
    return result + f", and {remaining} authors including {highlight(html.escape(self_identity.short_name))}."

def resolve_venue_alias(raw_venue: Optional[str], alias_table: Mapping[str, str]) -> str:
    """Map a raw journal code such as '\\apj' to its display markup."""
    if not raw_venue:
        return ""
    return alias_table.get(raw_venue, raw_venue)

def format_doi_link(doi: Optional[str]) -> str:
    if not doi:
        return ""
    safe_doi = html.escape(doi)
    return f'<a href="{DOI_URL}{safe_doi}" target="_blank">doi: {safe_doi}</a>'

def thumbnail_src(record: BibliographicRecord, thumbnail_path: str) -> str:
    return f"{thumbnail_path}{record.id}.png"

class PublicationFormatter:
    """Render bibliography records as publication cards."""

    def __init__(self, config: Config):
        self.config = config
        self.self_identity = config.self_identity
        self.alias_table = config.journal_aliases

    def authors(self, record: BibliographicRecord) -> str:
        return format_author_list(record.authors, self.self_identity, self.config.MAX_DISPLAY_AUTHORS)

    def journal_line(self, record: BibliographicRecord) -> str:
        """Venue, year and DOI link, comma separated."""
        venue = resolve_venue_alias(record.container_title, self.alias_table)
        year = "" if record.issued_year is None else str(record.issued_year)
        return f"{venue}, {year}, {format_doi_link(record.doi)}"

    def publication_card(self, record: BibliographicRecord) -> str:
        """Generate the HTML card for one publication."""
        thumb = html.escape(thumbnail_src(record, self.config.THUMBNAIL_PATH))
        title = html.escape(record.title)
        venue_note = html.escape(record.venue or "")

        return f"""
        <div class="publication-item">
            <div class="pub-thumbnail" data-modal-src="{thumb}">
                <img src="{thumb}" alt="{title}" loading="lazy">
            </div>
            <div class="pub-content">
                <div class="pub-title">{title}</div>
                <div class="pub-authors">{self.authors(record)}</div>
                <div class="pub-venue-container">
                    <span class="pub-venue">{venue_note}</span> </div>
                <div class="pub-journals">
                    {self.journal_line(record)}
                </div>
            </div>
        </div>
    """

    def render_publications(self, records: Iterable[BibliographicRecord]) -> str:
        cards: List[str] = [self.publication_card(r) for r in records]
        logger.info(f"Rendered {len(cards)} publication cards")
        return "".join(cards)
