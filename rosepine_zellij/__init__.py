"""
rosepine_zellij - Rose Pine themes for the Zellij terminal multiplexer.

Installs the theme files into ~/.config/zellij/themes and selects one
in ~/.config/zellij/config.kdl:
- Themes directory is created on confirmation
- Missing variants are downloaded in parallel
- The theme line of config.kdl is replaced, other lines are kept
"""

__version__ = "0.1.0"

from .config import ZellijPaths, rewrite_theme, write_theme
from .installer import RosePineError, UserAbort, NOT_SELECTED, run
from .theme.variants import ThemeVariant, load_variants

__all__ = [
    # Paths and config
    "ZellijPaths",
    "rewrite_theme",
    "write_theme",
    # Install flow
    "RosePineError",
    "UserAbort",
    "NOT_SELECTED",
    "run",
    # Variants
    "ThemeVariant",
    "load_variants",
]
