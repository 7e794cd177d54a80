import base64
import hashlib
import logging
from pathlib import Path

from .errors import SchemaError
from .metadata import validate_metadata
from .models import Page
from .settings import IndexSettings
from .utils import run_in_thread

log = logging.getLogger("mkdocs.plugins.docs_index")


def content_hash(content: str) -> str:
    return base64.b64encode(hashlib.sha256(content.encode("utf-8")).digest()).decode("ascii")


async def build_page(
    full_path: Path, rel_path: str, root_name: str, settings: IndexSettings
) -> Page:
    """Read one markdown file and turn it into a validated Page."""
    raw = await run_in_thread(Path(full_path).read_bytes)
    text = raw.decode("utf-8")
    try:
        metadata, content = settings.front_matter_parser(text)
    except SchemaError as exc:
        raise SchemaError(f"{exc} in {rel_path}") from exc
    meta = validate_metadata(metadata, rel_path, settings)
    log.debug(f"[docs_index] built page {rel_path} -> /{meta.path}")
    return Page(
        path=meta.path,
        title=meta.title,
        menu_title=meta.menu_title,
        content=content,
        content_hash=content_hash(content),
        source_url=settings.page_url(root_name, rel_path),
        redirect_paths=meta.redirect_paths,
        metadata=meta.extra,
    )
