import asyncio
import re
from typing import Any, Dict, Tuple

import yaml

from .errors import SchemaError

FM_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


def run_in_thread(func, *args, **kwargs):
    """Run blocking filesystem calls off the event loop."""
    loop = asyncio.get_running_loop()
    return loop.run_in_executor(None, lambda: func(*args, **kwargs))


def split_front_matter(source_text: str) -> Tuple[Dict[str, Any], str]:
    """
    Return (front_matter_dict, body_text). If no FM, dict={} and body=source_text.
    """
    m = FM_PATTERN.match(source_text)
    if not m:
        return {}, source_text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as exc:
        raise SchemaError(f"Unable to parse front matter: {exc}") from exc
    if not isinstance(fm, dict):
        raise SchemaError(
            f"Front matter must be a mapping, got {type(fm).__name__}"
        )
    return fm, source_text[m.end() :]
