"""tools/viewer.py

Opens the rendered book in the default browser.
"""

from __future__ import annotations

import logging
import webbrowser
from pathlib import Path

from errorbook.errors import ViewerError

logger = logging.getLogger(__name__)


def file_url(path: Path) -> str:
    """``file://`` URL for *path*, absolute when it can be canonicalized."""
    try:
        path = path.resolve(strict=True)
    except OSError:
        logger.debug("could not canonicalize %s, using it as given", path)
    return f"file://{path}"


def open_in_browser(index_html: Path) -> str:
    url = file_url(index_html)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise ViewerError(f"could not open {url}: {e}") from e
    if not opened:
        raise ViewerError(f"no browser available to open {url}")
    return url
