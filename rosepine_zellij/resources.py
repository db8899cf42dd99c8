"""Resource manager for development and installed package modes."""
from pathlib import Path


class ResourceManager:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._package_root = Path(__file__).parent
        return cls._instance

    def get_path(self, *parts: str) -> Path:
        """Get absolute path to a package resource."""
        path = self._package_root.joinpath(*parts)
        if not path.exists():
            raise FileNotFoundError(f"Resource not found: {path}")
        return path

    def read_text(self, *parts: str) -> str:
        return self.get_path(*parts).read_text(encoding="utf-8")

    @property
    def variants_file(self) -> Path:
        return self.get_path("theme", "variants.yaml")


# Singleton instance
resources = ResourceManager()
