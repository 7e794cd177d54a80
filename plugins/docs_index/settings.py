from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .utils import split_front_matter

DEFAULT_CDN_BASE = "https://apify-docs.s3.amazonaws.com/master"
DEFAULT_PAGE_EXT = "md"

# Keys a page's front matter may use. Anything else is a schema error.
DEFAULT_ALLOWED_METADATA_KEYS: Tuple[str, ...] = (
    "title",
    "menuTitle",
    "description",
    "menuWeight",
    "paths",
    "category",
    "hidden",
    "hideToc",
    "fullWidth",
    "externalUrl",
)

# Directories that hold assets or opaque sub-trees and need no overview page.
DEFAULT_EXEMPT_DIRS: Tuple[str, ...] = ("images", "api_v2")

DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160


def build_url(cdn_base: str, root_name: str, kind: str, rel_path: str) -> str:
    """Default URL template: ``{cdn_base}/{root}/{pages|assets}/{relative path}``."""
    return f"{cdn_base.rstrip('/')}/{root_name}/{kind}/{rel_path}"


@dataclass(frozen=True)
class IndexSettings:
    """Everything the index build needs, passed explicitly to each step.

    ``front_matter_parser`` takes the raw page text and returns
    ``(metadata, body)``. ``url_builder`` takes ``(cdn_base, root_name,
    kind, rel_path)`` and returns a fully-qualified URL.
    """

    cdn_base: str = DEFAULT_CDN_BASE
    page_ext: str = DEFAULT_PAGE_EXT
    allowed_metadata_keys: Tuple[str, ...] = DEFAULT_ALLOWED_METADATA_KEYS
    exempt_dirs: Tuple[str, ...] = DEFAULT_EXEMPT_DIRS
    description_min_length: int = DESCRIPTION_MIN_LENGTH
    description_max_length: int = DESCRIPTION_MAX_LENGTH
    front_matter_parser: Callable[[str], Tuple[Dict, str]] = split_front_matter
    url_builder: Callable[[str, str, str, str], str] = build_url

    def page_url(self, root_name: str, rel_path: str) -> str:
        return self.url_builder(self.cdn_base, root_name, "pages", rel_path)

    def asset_url(self, root_name: str, rel_path: str) -> str:
        return self.url_builder(self.cdn_base, root_name, "assets", rel_path)
