"""Pytest configuration and fixtures."""
import os
import sys
from pathlib import Path

import pytest

# Add src/ to the Python path so tests run without an install
PROJECT_ROOT = Path(__file__).parent.parent
SRC_PATH = str(PROJECT_ROOT / "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from homepage.config import Config
from homepage.models import Author, SelfIdentity

SAMPLE_BIB = r"""
@ARTICLE{2024ApJ...001W,
       author = {{Wu}, Zexuan and {Smith}, A. and {OGLE Collaboration}},
        title = "{A Planet Candidate from {KMTNet}}",
      journal = {\apj},
         year = 2024,
          doi = {10.3847/1538-4357/ad0001},
}

@ARTICLE{2023arXiv230100001L,
       author = {{Lee}, B. and {Kim}, C. and {Ng}, D. and {Oh}, E. and {Park}, F. and {Wu}, Zexuan},
        title = "{Binary Lens Events}",
      journal = {arXiv e-prints},
         year = 2023,
        venue = {Oral talk},
}

@INPROCEEDINGS{2022conf.....1M,
       author = {{M{\"u}ller}, Hans},
        title = "{Microlensing Surveys}",
    booktitle = {Some Obscure Journal},
         year = 2022,
}
"""

@pytest.fixture(autouse=True)
def mock_environment_vars(monkeypatch) -> None:
    """Set up test environment variables."""
    monkeypatch.setenv("HOMEPAGE_GIVEN_NAME", "Zexuan")
    monkeypatch.setenv("HOMEPAGE_SURNAME", "Wu")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

@pytest.fixture
def sample_bib() -> str:
    return SAMPLE_BIB

@pytest.fixture
def me() -> SelfIdentity:
    return SelfIdentity(given="Zexuan", family="Wu")

@pytest.fixture
def six_authors():
    """Six valid authors with the page owner first."""
    return [
        Author(given="Zexuan", family="Wu"),
        Author(given="A", family="Smith"),
        Author(given="B", family="Lee"),
        Author(given="C", family="Kim"),
        Author(given="D", family="Ng"),
        Author(given="E", family="Oh"),
    ]

@pytest.fixture
def site_root(tmp_path) -> Path:
    """A site directory with a bibliography at static/pub.bib."""
    static = tmp_path / "static"
    (static / "thumbnail").mkdir(parents=True)
    (static / "pub.bib").write_text(SAMPLE_BIB, encoding="utf-8")
    (static / "style.css").write_text("body {}", encoding="utf-8")
    return tmp_path

@pytest.fixture
def config(site_root) -> Config:
    return Config(SITE_ROOT=str(site_root), OUTPUT_FILE="out/index.html")
