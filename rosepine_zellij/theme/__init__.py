"""
Theme variants and their downloads.
"""

from .variants import ThemeVariant, load_variants
from .fetcher import fetch_variants, fetch_variant, PRESENT, DOWNLOADED

__all__ = [
    "ThemeVariant",
    "load_variants",
    "fetch_variants",
    "fetch_variant",
    "PRESENT",
    "DOWNLOADED",
]
