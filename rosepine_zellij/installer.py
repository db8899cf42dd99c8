"""
Install flow: themes directory, variant downloads, selection, config.

Prompts are passed in as callables so the flow can run without a
terminal. The CLI wires them to click.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from . import console
from .config import ZellijPaths, write_theme
from .theme.fetcher import fetch_variants
from .theme.variants import ThemeVariant

logger = logging.getLogger(__name__)

# --variant default meaning "ask the user"
NOT_SELECTED = "notselected"

ConfirmFn = Callable[[str, bool], bool]
ChooseFn = Callable[[str, Sequence[str], str], str]


class RosePineError(Exception):
    """Base error for the installer."""


class UserAbort(RosePineError):
    """The user declined a required step."""


def first_missing_ancestor(path: Path) -> Path:
    """Topmost directory that mkdir(parents=True) will have to create."""
    missing = path
    while not missing.parent.exists() and missing.parent != missing:
        missing = missing.parent
    return missing


def ensure_themes_dir(paths: ZellijPaths, confirm: ConfirmFn) -> Optional[Path]:
    """
    Make sure the themes directory exists, asking before creating it.

    Returns:
        The first directory created, or None if it already existed

    Raises:
        UserAbort: if the user refuses the creation
    """
    themes_dir = paths.themes_dir
    shown = paths.display(themes_dir)

    console.info(f"try to find themes directory in {console.highlight(shown)}")
    if themes_dir.is_dir():
        console.ok(f"{console.highlight('zellij', bold=True)} config directory exists")
        return None

    console.fail(f"cannot find themes directory in {console.highlight(shown)}")
    if not confirm(f"create {shown}?", True):
        console.fail(f"{console.highlight('zellij')} directory not exists")
        raise UserAbort(f"creation of {themes_dir} declined")

    created = first_missing_ancestor(themes_dir)
    themes_dir.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Created {themes_dir}")
    console.ok(f"created themes directory in {console.highlight(shown)}")
    console.sublog(console.dim(str(created)))
    return created


def _report_fetch(event: str, variant: ThemeVariant) -> None:
    name = console.highlight(variant.name)
    if event == "found":
        console.info(f"found {name}")
    elif event == "missing":
        console.fail(f"not found {name}")
        console.info(f"try to download {name}")
    elif event == "downloaded":
        console.ok(f"download successful {name}")


def install_variants(
    paths: ZellijPaths,
    variants: Mapping[str, ThemeVariant],
    session=None,
) -> dict[str, str]:
    console.info("try to find variants")
    return fetch_variants(
        variants.values(), paths.themes_dir, session=session, listener=_report_fetch
    )


def select_variant(requested: str, names: Sequence[str], choose: ChooseFn) -> str:
    """
    Resolve the variant to configure.

    An explicit request is used verbatim, known or not. Otherwise the user
    picks from ``names`` with the first one pre-selected.
    """
    if requested != NOT_SELECTED:
        return requested
    return choose("which variant type do you like?", list(names), names[0])


def run(
    paths: ZellijPaths,
    variants: Mapping[str, ThemeVariant],
    requested: str,
    confirm: ConfirmFn,
    choose: ChooseFn,
    session=None,
) -> str:
    """
    Run the whole install and return the configured variant name.

    Raises:
        UserAbort: if the themes directory may not be created
    """
    ensure_themes_dir(paths, confirm)
    install_variants(paths, variants, session=session)

    variant = select_variant(requested, list(variants.keys()), choose)
    write_theme(paths.config_file, variant)

    console.ok(f"your variant configured successfully: {console.highlight(variant, bold=True)}")
    return variant
