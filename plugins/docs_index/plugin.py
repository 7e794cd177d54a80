import logging
from pathlib import Path

from mkdocs.config.config_options import Type
from mkdocs.plugins import BasePlugin

from .settings import (
    DEFAULT_ALLOWED_METADATA_KEYS,
    DEFAULT_CDN_BASE,
    DEFAULT_EXEMPT_DIRS,
    DEFAULT_PAGE_EXT,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    IndexSettings,
)
from .traverser import build_index

log = logging.getLogger("mkdocs.plugins.docs_index")


class DocsIndexPlugin(BasePlugin):
    """
    Builds ``index.json`` from a tree of markdown pages and assets.

    Every page's front matter is validated, ``{{@link}}`` and ``{{@asset}}``
    placeholders are rewritten to site paths and the result is written into
    the site directory after the MkDocs build.
    """

    config_scheme = (
        ("source_dir", Type(str, required=True)),
        ("root_name", Type(str, default="")),
        ("cdn_base", Type(str, default=DEFAULT_CDN_BASE)),
        ("output", Type(str, default="index.json")),
        ("page_ext", Type(str, default=DEFAULT_PAGE_EXT)),
        ("allowed_metadata_keys", Type(list, default=list(DEFAULT_ALLOWED_METADATA_KEYS))),
        ("exempt_dirs", Type(list, default=list(DEFAULT_EXEMPT_DIRS))),
        ("description_min_length", Type(int, default=DESCRIPTION_MIN_LENGTH)),
        ("description_max_length", Type(int, default=DESCRIPTION_MAX_LENGTH)),
    )

    def get_settings(self) -> IndexSettings:
        return IndexSettings(
            cdn_base=self.config["cdn_base"],
            page_ext=self.config["page_ext"],
            allowed_metadata_keys=tuple(self.config["allowed_metadata_keys"]),
            exempt_dirs=tuple(self.config["exempt_dirs"]),
            description_min_length=self.config["description_min_length"],
            description_max_length=self.config["description_max_length"],
        )

    def resolve_source_dir(self, config) -> Path:
        """source_dir is relative to the directory holding mkdocs.yml."""
        source_dir = Path(self.config["source_dir"])
        if source_dir.is_absolute():
            return source_dir
        config_file_path = config.get("config_file_path")
        project_root = Path(config_file_path).resolve().parent if config_file_path else Path.cwd()
        return (project_root / source_dir).resolve()

    def on_post_build(self, config):
        source_dir = self.resolve_source_dir(config)
        if not source_dir.is_dir():
            raise FileNotFoundError(f"[docs_index] source_dir not found at {source_dir}")
        root_name = self.config["root_name"] or source_dir.name

        index = build_index(source_dir, root_name, self.get_settings())

        out_path = Path(config["site_dir"]) / self.config["output"]
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(index.to_json(), encoding="utf-8")
        log.info(f"[docs_index] index written to {out_path} (pages={len(index.pages)})")
