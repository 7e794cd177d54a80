import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import SchemaError
from .settings import IndexSettings

log = logging.getLogger("mkdocs.plugins.docs_index")


@dataclass
class PageMetadata:
    path: str
    title: str
    menu_title: str
    redirect_paths: List[str]
    extra: Dict[str, Any] = field(default_factory=dict)


def filename_path(rel_path: str, page_ext: str = "md") -> str:
    """
    Derive the canonical route of a page from its relative file path.

    ``guides/home.md`` -> ``guides``, ``web_scraping/intro.md`` ->
    ``web-scraping/intro``. Underscores always become hyphens.
    """
    home_suffix = f"/home.{page_ext}"
    ext_suffix = f".{page_ext}"
    if rel_path.endswith(home_suffix):
        route = rel_path[: -len(home_suffix)]
    elif rel_path.endswith(ext_suffix):
        route = rel_path[: -len(ext_suffix)]
    else:
        route = rel_path
    return route.replace("_", "-")


def validate_metadata(
    metadata: Dict[str, Any], rel_path: str, settings: IndexSettings
) -> PageMetadata:
    """
    Check parsed front matter against the allowed schema and derive the page route.

    Raises SchemaError on unknown keys, a missing title, missing or non-list
    ``paths``, or when ``paths`` does not contain the route derived from the
    file name. A description outside the recommended length only logs a warning.
    """
    allowed = settings.allowed_metadata_keys
    invalid_keys = [key for key in metadata if key not in allowed]
    if invalid_keys:
        raise SchemaError(
            f"Invalid metadata keys found in {rel_path}: {', '.join(invalid_keys)}, "
            f"allowed keys: {', '.join(allowed)}"
        )
    if not metadata.get("title"):
        raise SchemaError(f"Value metadata.title is missing in {rel_path}")
    paths = metadata.get("paths")
    if not isinstance(paths, list):
        raise SchemaError(f"Metadata.paths missing or not a list in {rel_path}")

    route = filename_path(rel_path, settings.page_ext)
    if route not in paths:
        raise SchemaError(f'Metadata.paths in {rel_path} is missing path "{route}"')

    description = metadata.get("description")
    if description:
        length = len(str(description))
        if length < settings.description_min_length or length > settings.description_max_length:
            too = "short" if length < settings.description_min_length else "long"
            log.warning(
                f"[docs_index] Description in {route}.{settings.page_ext} too {too} ({length}). "
                f"It should be between {settings.description_min_length} and "
                f"{settings.description_max_length} characters for best SEO."
            )

    title = metadata["title"]
    extra = {
        key: value
        for key, value in metadata.items()
        if key not in ("paths", "title", "menuTitle")
    }
    return PageMetadata(
        path=route,
        title=title,
        menu_title=metadata.get("menuTitle") or title,
        # never contains the page route itself
        redirect_paths=[p for p in paths if p != route],
        extra=extra,
    )
