import asyncio
import logging
import os
import posixpath
import stat
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import StructureError
from .models import Index
from .page_builder import build_page
from .resolver import resolve_references
from .settings import IndexSettings
from .utils import run_in_thread

log = logging.getLogger("mkdocs.plugins.docs_index")


async def classify_entries(
    current_path: Optional[str],
    entries: List[str],
    source_dir: Path,
    settings: IndexSettings,
) -> Tuple[List[str], List[str]]:
    """
    Split one directory listing into file paths and directory paths.

    Every directory except the exempt ones must have a ``<name>.md`` overview
    file next to it, otherwise the navigation menu cannot be built.
    """
    overview_ext = f".{settings.page_ext}"

    async def classify(entry: str) -> Tuple[str, bool]:
        rel_path = posixpath.join(current_path, entry) if current_path else entry
        st = await run_in_thread(os.lstat, Path(source_dir) / rel_path)
        is_dir = stat.S_ISDIR(st.st_mode)
        if (
            is_dir
            and entry not in settings.exempt_dirs
            and f"{entry}{overview_ext}" not in entries
        ):
            overview = f"{rel_path}{overview_ext}"
            raise StructureError(
                f'The directory "{rel_path}" doesn\'t have a corresponding overview file '
                f'"{overview}". This will break the menu.\n'
                "Please, add an overview for this section."
            )
        return rel_path, is_dir

    results = await asyncio.gather(*(classify(entry) for entry in entries))
    file_paths = [rel_path for rel_path, is_dir in results if not is_dir]
    dir_paths = [rel_path for rel_path, is_dir in results if is_dir]
    return file_paths, dir_paths


async def traverse_tree(
    source_dir: Path,
    root_name: str,
    settings: IndexSettings,
    current_path: Optional[str] = None,
) -> Index:
    """
    Walk ``source_dir`` recursively and collect every page and asset.

    Files and subdirectories of one level are processed concurrently; the
    level's index is assembled only after all of them finished. Results are
    merged in listing order so the outcome does not depend on which task
    completes first.
    """
    current_full_path = Path(source_dir) / current_path if current_path else Path(source_dir)
    entries = sorted(await run_in_thread(os.listdir, current_full_path))
    log.debug(f"[docs_index] listing {current_path or '.'}: {len(entries)} entries")

    file_paths, dir_paths = await classify_entries(current_path, entries, source_dir, settings)

    async def process_file(file_path: str) -> Index:
        level = Index()
        if file_path.split(".")[-1] == settings.page_ext:
            level.pages[file_path] = await build_page(
                Path(source_dir) / file_path, file_path, root_name, settings
            )
        else:
            level.assets[file_path] = settings.asset_url(root_name, file_path)
        return level

    tasks = [process_file(file_path) for file_path in file_paths]
    tasks += [traverse_tree(source_dir, root_name, settings, dir_path) for dir_path in dir_paths]

    index = Index()
    for sub_index in await asyncio.gather(*tasks):
        index.merge(sub_index)
    return index


def build_index(
    source_dir: Path, root_name: str, settings: Optional[IndexSettings] = None
) -> Index:
    """Traverse the source tree, then resolve placeholders against the complete index."""
    settings = settings or IndexSettings()
    log.info(f"[docs_index] indexing {source_dir}")
    index = asyncio.run(traverse_tree(Path(source_dir), root_name, settings))
    log.info(
        f"[docs_index] found {len(index.pages)} pages and {len(index.assets)} assets"
    )
    index.check_unique_paths()
    # Pages may link to pages discovered later, so resolution waits for the full index
    resolve_references(index)
    return index
