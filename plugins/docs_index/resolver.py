import logging
import re

from .errors import BrokenReferenceError
from .models import Index

log = logging.getLogger("mkdocs.plugins.docs_index")

# {{@link target}} or {{@link target#anchor}}, {{@asset key}}
LINK_PATTERN = re.compile(r"\{\{@link\s([^}]+)\}\}")
ASSET_PATTERN = re.compile(r"\{\{@asset\s([^}]+)\}\}")


def resolve_references(index: Index) -> None:
    """
    Rewrite link and asset placeholders of every page in place.

    Links resolve to ``/<canonical path>[#anchor]`` of the target page and
    assets to ``/<asset key>``. Anchors are not checked against the target.
    """
    for page_key, page in index.pages.items():

        def replace_link(match: re.Match) -> str:
            target, _, anchor = match.group(1).partition("#")
            linked_page = index.pages.get(target)
            if linked_page is None:
                raise BrokenReferenceError(
                    f"Page {page_key} contains invalid link {match.group(0)}!"
                )
            return f"/{linked_page.path}{'#' + anchor if anchor else ''}"

        def replace_asset(match: re.Match) -> str:
            asset_key = match.group(1)
            if asset_key not in index.assets:
                raise BrokenReferenceError(
                    f"Page {page_key} contains invalid asset {match.group(0)}!"
                )
            return f"/{asset_key}"

        resolved = LINK_PATTERN.sub(replace_link, page.content)
        resolved = ASSET_PATTERN.sub(replace_asset, resolved)
        if resolved != page.content:
            log.debug(f"[docs_index] resolved references in {page_key}")
        page.content = resolved
