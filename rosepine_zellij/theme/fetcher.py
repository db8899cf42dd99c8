"""
Theme downloads.

Each variant is checked and, if missing, downloaded on its own worker
thread. Variants write to disjoint files, so the workers share nothing.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Optional
import logging
import requests

from .variants import ThemeVariant

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30

PRESENT = "present"
DOWNLOADED = "downloaded"

# Receives (event, variant) for "found", "missing" and "downloaded"
FetchListener = Callable[[str, ThemeVariant], None]


def download_text(url: str, session=None) -> str:
    """GET a URL and return the response body as text."""
    http = session or requests
    response = http.get(url, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.text


def fetch_variant(
    variant: ThemeVariant,
    themes_dir: Path,
    session=None,
    listener: Optional[FetchListener] = None,
) -> str:
    """
    Make sure a single variant file exists in the themes directory.

    Existing files are never re-downloaded, whatever their content.

    Returns:
        PRESENT if the file was already there, DOWNLOADED otherwise
    """
    notify = listener or (lambda event, v: None)
    target = variant.target_path(themes_dir)

    if target.exists():
        logger.debug(f"{variant.name}: {target} exists, skipping")
        notify("found", variant)
        return PRESENT

    notify("missing", variant)
    logger.debug(f"{variant.name}: downloading {variant.source_url}")
    content = download_text(variant.source_url, session=session)
    target.write_text(content, encoding="utf-8")
    logger.debug(f"{variant.name}: wrote {len(content)} chars to {target}")
    notify("downloaded", variant)
    return DOWNLOADED


def fetch_variants(
    variants: Iterable[ThemeVariant],
    themes_dir: Path,
    session=None,
    listener: Optional[FetchListener] = None,
) -> dict[str, str]:
    """
    Fetch every missing variant concurrently.

    All workers are joined before returning. If any of them failed, the
    first failure seen is re-raised once the batch is complete.

    Returns:
        Mapping of variant name to PRESENT or DOWNLOADED
    """
    variants = list(variants)
    if not variants:
        return {}

    with ThreadPoolExecutor(max_workers=len(variants)) as pool:
        futures = {
            variant.name: pool.submit(fetch_variant, variant, themes_dir, session, listener)
            for variant in variants
        }

    # The pool has joined every worker at this point
    return {name: future.result() for name, future in futures.items()}
