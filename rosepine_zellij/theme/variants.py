"""
Theme variant table.

The known variants ship as package data (variants.yaml) and are loaded
once into a read-only mapping keyed by variant name.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping
import logging
import yaml
from rosepine_zellij.resources import resources

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("name", "filename", "source_url")


@dataclass(frozen=True)
class ThemeVariant:
    """A downloadable theme variant."""
    name: str
    filename: str
    source_url: str

    @classmethod
    def from_dict(cls, data: dict) -> ThemeVariant:
        """Build a variant from a YAML entry, rejecting incomplete ones."""
        missing = [key for key in REQUIRED_KEYS if not data.get(key)]
        if missing:
            raise ValueError(f"Variant entry {data!r} is missing: {', '.join(missing)}")
        return cls(
            name=str(data["name"]),
            filename=str(data["filename"]),
            source_url=str(data["source_url"]),
        )

    def target_path(self, themes_dir: Path) -> Path:
        """Local file this variant is stored in."""
        return themes_dir / self.filename


def parse_variants(text: str) -> Mapping[str, ThemeVariant]:
    """
    Parse a variants YAML document.

    Args:
        text: YAML with a top-level ``variants`` list

    Returns:
        Read-only mapping of name to variant, in document order
    """
    data = yaml.safe_load(text) or {}
    entries = data.get("variants") if isinstance(data, dict) else None
    if not isinstance(entries, list) or not entries:
        raise ValueError("Variant table must contain a non-empty 'variants' list")

    table: dict[str, ThemeVariant] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Variant entry must be a mapping, got {entry!r}")
        variant = ThemeVariant.from_dict(entry)
        if variant.name in table:
            raise ValueError(f"Duplicate variant name: {variant.name}")
        table[variant.name] = variant

    return MappingProxyType(table)


@lru_cache(maxsize=1)
def load_variants() -> Mapping[str, ThemeVariant]:
    """Load the packaged variant table (cached after the first call)."""
    variants = parse_variants(resources.read_text("theme", "variants.yaml"))
    logger.debug(f"Loaded {len(variants)} variants from {resources.variants_file}")
    return variants
