"""
Zellij configuration locations and the theme line in config.kdl.
Paths live under ~/.config/zellij
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

THEME_TOKEN = "theme"


@dataclass(frozen=True)
class ZellijPaths:
    """
    Filesystem locations used by the installer.

    Resolved once at startup; everything else receives this object.
    """
    home: Path
    config_dir: Path
    config_file: Path
    themes_dir: Path

    @classmethod
    def from_home(cls, home: Optional[Path] = None) -> ZellijPaths:
        """Resolve the Zellij layout under a home directory (default: current user)."""
        home = Path(home) if home is not None else Path.home()
        config_dir = home / ".config" / "zellij"
        return cls(
            home=home,
            config_dir=config_dir,
            config_file=config_dir / "config.kdl",
            themes_dir=config_dir / "themes",
        )

    def display(self, path: Path) -> str:
        """Render a path with the home directory shortened to ~."""
        try:
            return str(Path("~") / path.relative_to(self.home))
        except ValueError:
            return str(path)


def theme_line(name: str) -> str:
    return f'{THEME_TOKEN} "{name}"'


def rewrite_theme(text: str, name: str) -> str:
    """
    Replace the theme selection in config text.

    Every line starting with the ``theme`` token is dropped (plain prefix
    match, so ``themepark`` goes too) and a single ``theme "<name>"`` line
    is appended. A trailing newline is kept after the new last line.
    """
    lines = text.split("\n")
    trailing_newline = len(lines) > 1 and lines[-1] == ""
    if trailing_newline:
        lines.pop()

    kept = [line for line in lines if not line.startswith(THEME_TOKEN)]
    kept.append(theme_line(name))

    result = "\n".join(kept)
    return result + "\n" if trailing_newline else result


def write_theme(config_file: Path, name: str) -> None:
    """Select a theme in config.kdl, creating the file if needed."""
    if not config_file.exists():
        config_file.write_text(theme_line(name), encoding="utf-8", newline="")
        logger.debug(f"Created {config_file} with theme {name}")
        return

    # newline="" keeps \r\n endings of the lines left untouched
    with open(config_file, encoding="utf-8", newline="") as f:
        content = f.read()
    config_file.write_text(rewrite_theme(content, name), encoding="utf-8", newline="")
    logger.debug(f"Rewrote theme line in {config_file}")
