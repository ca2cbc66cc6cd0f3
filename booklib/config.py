"""
Configuration management for booklib.

Settings are read from a JSON file:
- XDG config directory: ~/.config/booklib/config.json
- Fallback: ~/.booklib/config.json

Only front-end preferences live here; books themselves are never saved.
"""

import json
import logging
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class UIConfig:
    """Streamlit page settings."""
    page_title: str = "Book Library"
    layout: str = "centered"


@dataclass
class ServerConfig:
    """Streamlit server settings used by ``booklib ui``."""
    host: str = "localhost"
    port: int = 8501
    auto_open_browser: bool = True
    headless: bool = False


@dataclass
class CLIConfig:
    """CLI default options."""
    verbose: bool = False
    color: bool = True


def _section(cls, data: Optional[Dict[str, Any]]):
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in (data or {}).items() if k in known})


@dataclass
class BookLibConfig:
    """Main booklib configuration."""
    ui: UIConfig = field(default_factory=UIConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ui": asdict(self.ui),
            "server": asdict(self.server),
            "cli": asdict(self.cli),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BookLibConfig':
        """Create from dictionary, ignoring keys this version does not know."""
        return cls(
            ui=_section(UIConfig, data.get("ui")),
            server=_section(ServerConfig, data.get("server")),
            cli=_section(CLIConfig, data.get("cli")),
        )


def get_config_path() -> Path:
    """
    Get configuration file path.

    Follows the XDG Base Directory layout when ~/.config exists,
    otherwise falls back to ~/.booklib.
    """
    xdg_config_home = Path.home() / ".config"
    if xdg_config_home.exists():
        config_dir = xdg_config_home / "booklib"
    else:
        config_dir = Path.home() / ".booklib"

    return config_dir / "config.json"


def load_config() -> BookLibConfig:
    """Load configuration, falling back to defaults when missing or unreadable."""
    config_path = get_config_path()

    if not config_path.exists():
        return BookLibConfig()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
        return BookLibConfig.from_dict(data)
    except (json.JSONDecodeError, OSError, TypeError, AttributeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}; using defaults")
        return BookLibConfig()


def save_config(config: BookLibConfig) -> Path:
    """Write configuration to disk and return the path written."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    logger.debug(f"Configuration saved to {config_path}")
    return config_path


def ensure_config_exists() -> Path:
    """Create the config file with defaults if it does not exist yet."""
    config_path = get_config_path()

    if not config_path.exists():
        save_config(BookLibConfig())
        logger.info(f"Created default configuration at {config_path}")

    return config_path


def update_config(
    # UI settings
    ui_page_title: Optional[str] = None,
    ui_layout: Optional[str] = None,
    # Server settings
    server_host: Optional[str] = None,
    server_port: Optional[int] = None,
    server_auto_open: Optional[bool] = None,
    server_headless: Optional[bool] = None,
    # CLI settings
    cli_verbose: Optional[bool] = None,
    cli_color: Optional[bool] = None,
) -> BookLibConfig:
    """
    Update configuration.

    Only updates provided values, leaving others unchanged.
    """
    if ui_layout is not None and ui_layout not in ("centered", "wide"):
        raise ValueError(f"Layout must be 'centered' or 'wide', not {ui_layout!r}")

    config = load_config()

    if ui_page_title is not None:
        config.ui.page_title = ui_page_title
    if ui_layout is not None:
        config.ui.layout = ui_layout

    if server_host is not None:
        config.server.host = server_host
    if server_port is not None:
        config.server.port = server_port
    if server_auto_open is not None:
        config.server.auto_open_browser = server_auto_open
    if server_headless is not None:
        config.server.headless = server_headless

    if cli_verbose is not None:
        config.cli.verbose = cli_verbose
    if cli_color is not None:
        config.cli.color = cli_color

    save_config(config)
    return config
