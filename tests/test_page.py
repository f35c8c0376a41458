"""Tests for the video gallery, page rendering and CLI."""
import pytest

from homepage.__main__ import main
from homepage.config import VIDEOS_FFP, VIDEOS_GENERAL, Config
from homepage.gallery import render_video_row
from homepage.models import VideoItem
from homepage.page import ERROR_MESSAGE, build_page, render_page, write_page
from homepage.utils.error_handling import BibliographyUnavailableError, ConfigError

class TestVideoRow:

    def test_empty_row(self):
        assert render_video_row([], "./static/ani/") == ""

    def test_video_markup(self):
        html = render_video_row([VideoItem(title="Single-lens event", src="pspl.mp4")], "./static/ani/")
        assert '<source src="./static/ani/pspl.mp4" type="video/mp4" />' in html
        assert '<div class="video-title">Single-lens event</div>' in html
        assert '<video controls preload="metadata">' in html

    def test_one_wrapper_per_video(self):
        html = render_video_row(VIDEOS_FFP, "ani/")
        assert html.count('class="video-wrapper"') == len(VIDEOS_FFP)

    def test_title_escaped(self):
        html = render_video_row([VideoItem(title="Lens + Source <3>", src="a.mp4")], "")
        assert "Lens + Source &lt;3&gt;" in html

class TestRenderPage:

    def test_page_with_publications(self, config, sample_bib):
        from homepage.bibliography import parse_bibliography
        html = render_page(config, records=parse_bibliography(sample_bib))
        assert html.count('class="publication-item"') == 3
        assert "<i>ApJ</i>, 2024," in html
        assert '<span class="highlight-name">Zexuan Wu</span>' in html
        assert ERROR_MESSAGE not in html

    def test_video_rows(self, config):
        html = render_page(config, records=[])
        assert 'id="video-row-general"' in html
        assert 'id="video-row-ffp"' in html
        assert html.count('class="video-wrapper"') == len(VIDEOS_GENERAL) + len(VIDEOS_FFP)

    def test_error_variant(self, config):
        html = render_page(config, error=BibliographyUnavailableError("Bibliography unavailable"))
        assert ERROR_MESSAGE in html
        assert 'class="publication-item"' not in html

    def test_modal_present_without_inline_handlers(self, config):
        html = render_page(config, records=[])
        assert 'id="imageModal"' in html
        assert "onclick=" not in html
        assert "onerror=" not in html

    def test_already_failed_thumbnails_are_hidden(self, config):
        html = render_page(config, records=[])
        assert "img.complete && img.naturalWidth === 0" in html

    def test_title_is_escaped_in_template(self, config):
        config.PAGE_TITLE = "Papers <draft>"
        html = render_page(config, records=[])
        assert "<title>Papers &lt;draft&gt;</title>" in html

class TestBuildPage:

    def test_build_from_site_root(self, config):
        html = build_page(config)
        assert html.count('class="publication-item"') == 3

    def test_missing_bibliography_shows_error(self, config):
        config.BIB_PATH = "static/missing.bib"
        html = build_page(config)
        assert ERROR_MESSAGE in html

    def test_unparseable_bibliography_shows_error(self, config, site_root):
        (site_root / "static" / "pub.bib").write_text("<html><body>404 Not Found</body></html>", encoding="utf-8")
        html = build_page(config)
        assert ERROR_MESSAGE in html
        assert 'class="publication-item"' not in html

    def test_write_page(self, config, site_root):
        path = write_page(config)
        assert path == site_root / "out" / "index.html"
        assert "publication-item" in path.read_text(encoding="utf-8")

class TestConfig:

    def test_env_defaults(self, monkeypatch):
        monkeypatch.setenv("HOMEPAGE_MAX_AUTHORS", "3")
        config = Config()
        assert config.MAX_DISPLAY_AUTHORS == 3
        assert config.self_identity.given == "Zexuan"
        assert config.self_identity.short_name == "Z. Wu"

    def test_invalid_max_display(self):
        with pytest.raises(ConfigError):
            Config(MAX_DISPLAY_AUTHORS=0).validate()

    def test_invalid_timeout(self):
        with pytest.raises(ConfigError):
            Config(REQUEST_TIMEOUT=0).validate()

    def test_non_numeric_env_value(self, monkeypatch):
        monkeypatch.setenv("HOMEPAGE_TIMEOUT", "ten")
        with pytest.raises(ConfigError):
            Config()

    def test_bib_source_resolution(self, site_root):
        config = Config(SITE_ROOT=str(site_root))
        assert config.get_bib_source() == str(site_root / "static" / "pub.bib")
        config.BIB_PATH = "https://example.org/pub.bib"
        assert config.get_bib_source() == "https://example.org/pub.bib"

class TestCommandLine:

    def test_build_command(self, site_root, monkeypatch, capsys):
        monkeypatch.setenv("HOMEPAGE_SITE_ROOT", str(site_root))
        output = site_root / "public" / "index.html"
        assert main(["build", "--output", str(output)]) == 0
        assert output.exists()
        assert "Saved to" in capsys.readouterr().out

    def test_build_with_bad_config(self, site_root, monkeypatch):
        monkeypatch.setenv("HOMEPAGE_SITE_ROOT", str(site_root))
        monkeypatch.setenv("HOMEPAGE_MAX_AUTHORS", "0")
        assert main(["build"]) == 1

    def test_build_with_non_numeric_config(self, site_root, monkeypatch):
        monkeypatch.setenv("HOMEPAGE_SITE_ROOT", str(site_root))
        monkeypatch.setenv("HOMEPAGE_MAX_AUTHORS", "five")
        assert main(["build"]) == 1

    def test_bib_override(self, site_root, monkeypatch):
        monkeypatch.setenv("HOMEPAGE_SITE_ROOT", str(site_root))
        output = site_root / "index.html"
        assert main(["build", "--bib", str(site_root / "nothing.bib"), "--output", str(output)]) == 0
        assert ERROR_MESSAGE in output.read_text(encoding="utf-8")
