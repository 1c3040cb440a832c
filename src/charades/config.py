"""Configuration loading and defaults for Charades."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .gestures import MIN_SWIPE_DISTANCE
from .loader import DEFAULT_TIMEOUT


def get_config_dir() -> Path:
    """Get the charades config directory (XDG-style)."""
    return Path.home() / ".config" / "charades"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_data_dir() -> Path:
    """Get the default data directory for the log file."""
    return Path.home() / ".local" / "share" / "charades"


def get_default_catalog_source() -> str:
    """Get the default catalog location (charades.json next to the config)."""
    return str(get_config_dir() / "charades.json")


@dataclass
class CatalogConfig:
    """Where the card catalog comes from."""

    source: str = field(default_factory=lambda: get_default_catalog_source())
    timeout: float = DEFAULT_TIMEOUT  # seconds, HTTP only
    watch: bool = True  # reload when a local source changes


@dataclass
class DisplayConfig:
    """Card display configuration."""

    show_flavor_text: bool = True
    swipe_threshold: int = MIN_SWIPE_DISTANCE


@dataclass
class Config:
    """Application configuration."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    data_directory: Path = field(default_factory=lambda: get_default_data_dir())
    log_level: str = "INFO"

    def get_log_path(self) -> Path:
        """Get the log file path based on configured data directory."""
        return self.data_directory / "charades.log"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            # Create default config file
            default_config = cls()
            default_config.data_directory.mkdir(parents=True, exist_ok=True)
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        # Parse catalog config
        cat_data = data.get("catalog", {})
        source = cat_data.get("source", "")
        catalog = CatalogConfig(
            source=source or get_default_catalog_source(),
            timeout=float(cat_data.get("timeout", DEFAULT_TIMEOUT)),
            watch=cat_data.get("watch", True),
        )

        # Parse display config
        disp_data = data.get("display", {})
        display = DisplayConfig(
            show_flavor_text=disp_data.get("show_flavor_text", True),
            swipe_threshold=int(disp_data.get("swipe_threshold", MIN_SWIPE_DISTANCE)),
        )

        data_dir = data.get("data_directory", str(get_default_data_dir()))
        data_directory = Path(data_dir).expanduser()

        config = cls(
            catalog=catalog,
            display=display,
            data_directory=data_directory,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

        # Ensure data directory exists
        config.data_directory.mkdir(parents=True, exist_ok=True)

        return config

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# Charades Configuration',
            '',
            '# Directory for the log file',
            '# Default: ~/.local/share/charades',
            f'data_directory = "{self.data_directory}"',
            '',
            '# DEBUG, INFO, WARNING or ERROR',
            f'log_level = "{self.log_level}"',
            '',
            '# Card catalog: an http(s) URL or a path to a JSON file',
            '[catalog]',
            f'source = "{self.catalog.source}"',
            f'timeout = {self.catalog.timeout}  # seconds, URLs only',
            f'watch = {str(self.catalog.watch).lower()}  # reload when a local file changes',
            '',
            '[display]',
            f'show_flavor_text = {str(self.display.show_flavor_text).lower()}',
            f'swipe_threshold = {self.display.swipe_threshold}  # cells of mouse drag',
        ]

        config_path.write_text("\n".join(lines) + "\n")
