"""Data models for the homepage builder."""
from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class Author:
    """An author as parsed from the bibliography.

    ``literal`` is set for group names such as "OGLE Collaboration" that
    were written as a single braced group and must not be displayed.
    """
    given: Optional[str] = None
    family: Optional[str] = None
    literal: Optional[str] = None

    @property
    def is_literal(self) -> bool:
        return bool(self.literal)

@dataclass(frozen=True)
class SelfIdentity:
    """The page owner, used to highlight their own name."""
    given: str
    family: str

    def matches(self, author: Author) -> bool:
        return author.given == self.given and author.family == self.family

    @property
    def short_name(self) -> str:
        """Initial plus surname, e.g. 'Z. Wu'."""
        if not self.given:
            return self.family
        return f"{self.given[0]}. {self.family}"

@dataclass(frozen=True)
class BibliographicRecord:
    """Represents one bibliography entry (article, proceedings, etc.)."""
    id: str
    title: str = ""
    authors: Optional[List[Author]] = field(default=None)
    container_title: Optional[str] = None
    issued_year: Optional[int] = None
    doi: Optional[str] = None
    venue: Optional[str] = None
    entry_type: str = "article"

@dataclass(frozen=True)
class VideoItem:
    """An animation shown in the video gallery."""
    title: str
    src: str
