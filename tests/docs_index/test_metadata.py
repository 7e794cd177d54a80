import logging

import pytest

from plugins.docs_index.errors import SchemaError
from plugins.docs_index.metadata import filename_path, validate_metadata
from plugins.docs_index.settings import IndexSettings


class TestFilenamePath:
    def test_strips_extension(self):
        assert filename_path("guides/intro.md") == "guides/intro"

    def test_strips_home_page(self):
        assert filename_path("guides/home.md") == "guides"

    def test_top_level_home_keeps_name(self):
        assert filename_path("home.md") == "home"

    def test_underscores_become_hyphens(self):
        assert filename_path("web_scraping/getting_started.md") == "web-scraping/getting-started"

    def test_only_trailing_extension_is_stripped(self):
        assert filename_path("a.md_notes/page.md") == "a.md-notes/page"


class TestValidateMetadata:
    def setup_method(self):
        self.settings = IndexSettings()

    def test_valid_metadata(self):
        meta = validate_metadata(
            {"title": "Intro", "paths": ["guides/intro", "old/intro"], "menuWeight": 3},
            "guides/intro.md",
            self.settings,
        )
        assert meta.path == "guides/intro"
        assert meta.title == "Intro"
        assert meta.menu_title == "Intro"
        assert meta.redirect_paths == ["old/intro"]
        assert meta.extra == {"menuWeight": 3}

    def test_menu_title_is_kept(self):
        meta = validate_metadata(
            {"title": "Introduction", "menuTitle": "Intro", "paths": ["intro"]},
            "intro.md",
            self.settings,
        )
        assert meta.menu_title == "Intro"

    def test_invalid_keys_are_listed(self):
        with pytest.raises(SchemaError) as exc_info:
            validate_metadata(
                {"title": "X", "paths": ["x"], "author": "me", "tags": []},
                "x.md",
                self.settings,
            )
        message = str(exc_info.value)
        assert "author, tags" in message
        assert "allowed keys: title, menuTitle" in message

    @pytest.mark.parametrize("metadata", [{"paths": ["x"]}, {"title": "", "paths": ["x"]}])
    def test_missing_title(self, metadata):
        with pytest.raises(SchemaError, match="title is missing"):
            validate_metadata(metadata, "x.md", self.settings)

    @pytest.mark.parametrize("metadata", [{"title": "X"}, {"title": "X", "paths": "x"}])
    def test_paths_must_be_a_list(self, metadata):
        with pytest.raises(SchemaError, match="paths missing or not a list"):
            validate_metadata(metadata, "x.md", self.settings)

    def test_filename_path_must_be_declared(self):
        with pytest.raises(SchemaError, match='missing path "web-scraping"'):
            validate_metadata(
                {"title": "X", "paths": ["web_scraping"]}, "web_scraping.md", self.settings
            )

    def test_redirect_paths_never_contain_own_path(self):
        meta = validate_metadata(
            {"title": "X", "paths": ["x", "y", "x", "z", "y"]}, "x.md", self.settings
        )
        assert meta.path == "x"
        assert meta.redirect_paths == ["y", "z", "y"]

    def test_custom_allow_list(self):
        settings = IndexSettings(allowed_metadata_keys=("title", "paths", "author"))
        meta = validate_metadata(
            {"title": "X", "paths": ["x"], "author": "me"}, "x.md", settings
        )
        assert meta.extra == {"author": "me"}


class TestDescriptionLength:
    def setup_method(self):
        self.settings = IndexSettings()

    def _validate(self, length):
        return validate_metadata(
            {"title": "X", "paths": ["x"], "description": "d" * length},
            "x.md",
            self.settings,
        )

    @pytest.mark.parametrize("length", [120, 140, 160])
    def test_valid_length_does_not_warn(self, caplog, length):
        caplog.set_level(logging.WARNING)
        self._validate(length)
        assert "Description" not in caplog.text

    def test_too_short_warns(self, caplog):
        caplog.set_level(logging.WARNING)
        meta = self._validate(119)
        assert meta.path == "x"
        assert "Description in x.md too short (119)" in caplog.text

    def test_too_long_warns(self, caplog):
        caplog.set_level(logging.WARNING)
        meta = self._validate(161)
        assert meta.extra["description"] == "d" * 161
        assert "Description in x.md too long (161)" in caplog.text
