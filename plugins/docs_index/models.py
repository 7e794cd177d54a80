import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import StructureError


@dataclass
class Page:
    """One markdown source file as it appears in the index.

    ``content`` is the only field changed after creation; the reference
    resolver rewrites it once. ``content_hash`` always describes the
    unresolved body.
    """

    path: str
    title: str
    menu_title: str
    content: str
    content_hash: str
    source_url: str
    redirect_paths: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out = dict(self.metadata)
        out.update(
            {
                "title": self.title,
                "menuTitle": self.menu_title,
                "content": self.content,
                "contentHash": self.content_hash,
                "sourceUrl": self.source_url,
                "path": self.path,
                "redirectPaths": list(self.redirect_paths),
            }
        )
        return out


@dataclass
class Index:
    """Pages and assets keyed by their path relative to the source root."""

    pages: Dict[str, Page] = field(default_factory=dict)
    assets: Dict[str, str] = field(default_factory=dict)

    def merge(self, other: "Index") -> None:
        for key, page in other.pages.items():
            if key in self.pages:
                raise StructureError(f"Duplicate page key '{key}' while merging index")
            self.pages[key] = page
        for key, url in other.assets.items():
            if key in self.assets:
                raise StructureError(f"Duplicate asset key '{key}' while merging index")
            self.assets[key] = url

    def check_unique_paths(self) -> None:
        """Fail when two source files map to the same canonical route."""
        seen: Dict[str, str] = {}
        for key, page in self.pages.items():
            if page.path in seen:
                raise StructureError(
                    f'Pages {seen[page.path]} and {key} both use the path "{page.path}"'
                )
            seen[page.path] = key

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pages": {key: page.to_dict() for key, page in self.pages.items()},
            "assets": dict(self.assets),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
