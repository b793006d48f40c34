"""
Configuration management for memfs.

Handles loading and saving user configuration from:
- XDG config directory: ~/.config/memfs/config.json
- Fallback: ~/.memfs/config.json
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"


@dataclass
class CLIConfig:
    """CLI default options."""
    verbose: bool = False
    color: bool = True


def _known(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class MemFSConfig:
    """Main memfs configuration."""
    server: ServerConfig = field(default_factory=ServerConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "server": asdict(self.server),
            "cli": asdict(self.cli),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MemFSConfig':
        """Create from dictionary, ignoring unknown keys."""
        server_data = data.get("server", {})
        cli_data = data.get("cli", {})
        return cls(
            server=ServerConfig(**_known(ServerConfig, server_data)),
            cli=CLIConfig(**_known(CLIConfig, cli_data)),
        )


def get_config_path() -> Path:
    """
    Get configuration file path.

    Follows XDG Base Directory specification:
    1. $XDG_CONFIG_HOME/memfs/config.json (usually ~/.config/memfs/config.json)
    2. Fallback: ~/.memfs/config.json

    Returns:
        Path to config file
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    xdg_config_home = Path(xdg) if xdg else Path.home() / ".config"
    if xdg_config_home.exists():
        config_dir = xdg_config_home / "memfs"
    else:
        config_dir = Path.home() / ".memfs"

    return config_dir / "config.json"


def load_config() -> MemFSConfig:
    """
    Load configuration from file.

    Returns:
        MemFSConfig instance with loaded values or defaults
    """
    config_path = get_config_path()

    if not config_path.exists():
        return MemFSConfig()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
        return MemFSConfig.from_dict(data)
    except (json.JSONDecodeError, OSError, TypeError, AttributeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}; using defaults")
        return MemFSConfig()


def save_config(config: MemFSConfig) -> Path:
    """
    Save configuration to file.

    Args:
        config: Configuration to save

    Returns:
        Path the configuration was written to
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    logger.info(f"Configuration saved to {config_path}")
    return config_path


def update_config(
    # Server settings
    server_host: Optional[str] = None,
    server_port: Optional[int] = None,
    server_log_level: Optional[str] = None,
    # CLI settings
    cli_verbose: Optional[bool] = None,
    cli_color: Optional[bool] = None,
) -> MemFSConfig:
    """
    Update configuration.

    Only updates provided values, leaving others unchanged.
    """
    config = load_config()

    if server_host is not None:
        config.server.host = server_host
    if server_port is not None:
        config.server.port = server_port
    if server_log_level is not None:
        config.server.log_level = server_log_level

    if cli_verbose is not None:
        config.cli.verbose = cli_verbose
    if cli_color is not None:
        config.cli.color = cli_color

    save_config(config)
    return config
