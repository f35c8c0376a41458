"""Load the BibTeX bibliography and convert entries to records."""
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import bibtexparser
import requests
from bibtexparser.bparser import BibTexParser
from bibtexparser.customization import splitname
from bibtexparser.latexenc import latex_to_unicode
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import Author, BibliographicRecord
from .utils.error_handling import data_source_handler

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = [429, 500, 502, 503, 504]

_NAME_SEPARATOR = re.compile(r"(\s+and\s+|[{}])", re.IGNORECASE)
_YEAR = re.compile(r"\d{4}")
_ENTRY_START = re.compile(r"^\s*@\s*(\w+)\s*[{(]", re.MULTILINE)
_SPECIAL_BLOCKS = {"comment", "string", "preamble"}

def build_session(max_retries: int = 3, backoff_factor: float = 1) -> requests.Session:
    """Create a requests session that retries transient HTTP failures."""
    session = requests.Session()
    retry = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session

def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))

def read_bibliography_source(source: str, timeout: float = 10, session: Optional[requests.Session] = None) -> str:
    """Return the raw BibTeX text from a URL or a local file."""
    if is_url(source):
        session = session or build_session()
        logger.info(f"Fetching bibliography: {source}")
        response = session.get(source, timeout=timeout)
        response.raise_for_status()
        # Static hosts often omit the charset; .bib files are UTF-8
        response.encoding = "utf-8"
        return response.text

    logger.info(f"Reading bibliography: {source}")
    return Path(source).read_text(encoding="utf-8")

def _clean(text: str) -> str:
    """Decode LaTeX accents and drop grouping braces."""
    text = latex_to_unicode(text)
    text = text.replace("{", "").replace("}", "")
    return " ".join(text.split())

def _is_single_group(name: str) -> bool:
    """True for names like '{OGLE Collaboration}' that are one braced group."""
    if not (name.startswith("{") and name.endswith("}")):
        return False
    depth = 0
    for i, char in enumerate(name):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0 and i != len(name) - 1:
                return False
    return depth == 0

def split_names(value: str) -> List[str]:
    """Split a BibTeX name list on 'and', ignoring 'and' inside braces."""
    names = []
    current = []
    depth = 0
    for token in _NAME_SEPARATOR.split(value):
        if token == "{":
            depth += 1
        elif token == "}":
            depth -= 1
        elif depth == 0 and token.strip().lower() == "and" and token != token.strip():
            names.append("".join(current).strip())
            current = []
            continue
        current.append(token)
    names.append("".join(current).strip())
    return [n for n in names if n]

def parse_author(name: str) -> Author:
    name = " ".join(name.split())
    if _is_single_group(name):
        return Author(literal=_clean(name))
    try:
        parts = splitname(name, strict_mode=False)
    except ValueError as e:
        # bibtexparser raises InvalidName (a ValueError) for malformed names
        logger.warning(f"Could not split author name '{name}': {e}")
        return Author(family=_clean(name))

    given = " ".join(parts.get("first", []))
    family = " ".join(parts.get("von", []) + parts.get("last", []))
    jr = " ".join(parts.get("jr", []))
    if jr:
        family = f"{family} {jr}"
    return Author(given=_clean(given) or None, family=_clean(family) or None)

def _parse_year(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    match = _YEAR.search(value)
    return int(match.group(0)) if match else None

def record_from_entry(entry: Dict[str, Any]) -> BibliographicRecord:
    """Convert a bibtexparser entry dict to a BibliographicRecord."""
    authors = None
    if entry.get("author"):
        authors = [parse_author(n) for n in split_names(entry["author"])]

    # Journal macros such as \apj are kept raw so they can be aliased
    container = entry.get("journal") or entry.get("booktitle")
    container = container.strip() if container else None

    doi = entry.get("doi")
    return BibliographicRecord(
        id=entry.get("ID", ""),
        title=_clean(entry.get("title", "")),
        authors=authors,
        container_title=container or None,
        issued_year=_parse_year(entry.get("year")),
        doi=doi.strip() if doi else None,
        venue=_clean(entry["venue"]) if entry.get("venue") else None,
        entry_type=entry.get("ENTRYTYPE", "article"),
    )

def _has_content(text: str) -> bool:
    """True when the text holds anything besides blank lines and % comments."""
    return any(line.strip() and not line.lstrip().startswith("%") for line in text.splitlines())

def parse_bibliography(text: str) -> List[BibliographicRecord]:
    """Parse BibTeX text, keeping the order of entries in the file.

    Raises:
        ValueError: the text is not BibTeX, or some entries could not be parsed.
    """
    parser = BibTexParser(common_strings=True)
    parser.ignore_nonstandard_types = False
    database = bibtexparser.loads(text, parser=parser)

    # bibtexparser skips what it cannot parse instead of failing
    starts = [m.group(1).lower() for m in _ENTRY_START.finditer(text)]
    expected = sum(1 for kind in starts if kind not in _SPECIAL_BLOCKS)
    if len(database.entries) < expected:
        raise ValueError(f"Only {len(database.entries)} of {expected} bibliography entries could be parsed")
    if not database.entries and not starts and _has_content(text):
        raise ValueError("No BibTeX entries found")

    records = [record_from_entry(entry) for entry in database.entries]
    logger.info(f"Parsed {len(records)} bibliography entries")
    return records

@data_source_handler
def load_bibliography(source: str, timeout: float = 10,
                      session: Optional[requests.Session] = None) -> List[BibliographicRecord]:
    """Read and parse the bibliography.

    Raises:
        BibliographyUnavailableError: the source could not be read or parsed.
    """
    text = read_bibliography_source(source, timeout=timeout, session=session)
    return parse_bibliography(text)
