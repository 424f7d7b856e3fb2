"""
Configuration file loading for vcardctl.

Loads .vcardctl.yaml from project root or home directory.
Config values provide defaults that can be overridden by CLI options.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CONFIG_FILENAME = ".vcardctl.yaml"
OUTPUT_FORMATS = ("table", "json")


@dataclass
class ConfigOutput:
    """Output settings from config file."""
    format: str = "table"


@dataclass
class ConfigCheck:
    """Settings for the check command."""
    fail_fast: bool = False
    skip_delimiters: bool = True


@dataclass
class Config:
    """Loaded configuration."""
    output: ConfigOutput = field(default_factory=ConfigOutput)
    check: ConfigCheck = field(default_factory=ConfigCheck)
    source_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict, source_path: Optional[Path] = None) -> "Config":
        """Create Config from parsed YAML dict."""
        config = cls(source_path=source_path)

        # Output
        if "output" in data and isinstance(data["output"], dict):
            fmt = str(data["output"].get("format", config.output.format)).lower()
            if fmt in OUTPUT_FORMATS:
                config.output.format = fmt
            else:
                logging.getLogger("vcardctl.core.config").warning(
                    f"Ignoring unknown output format {fmt!r} in {source_path or 'config'}"
                )

        # Check
        if "check" in data and isinstance(data["check"], dict):
            chk = data["check"]
            config.check.fail_fast = bool(chk.get("fail_fast", config.check.fail_fast))
            config.check.skip_delimiters = bool(
                chk.get("skip_delimiters", config.check.skip_delimiters)
            )

        return config


# Global cached config
_cached_config: Optional[Config] = None


def load_config(path: Optional[Path] = None, use_cache: bool = True) -> Config:
    """Load .vcardctl.yaml from project root or home.

    Search order:
    1. Explicit path if provided
    2. .vcardctl.yaml in current directory
    3. .vcardctl.yaml in parent directories (up to git root or /)
    4. ~/.vcardctl.yaml in home directory

    Args:
        path: Explicit path to config file
        use_cache: Whether to use cached config (default True)

    Returns:
        Loaded Config, or default Config if no file found
    """
    global _cached_config

    if use_cache and _cached_config is not None:
        return _cached_config

    config_path = None

    if path and path.exists():
        config_path = path
    else:
        # Search current directory and parents
        search_dir = Path.cwd()
        while search_dir != search_dir.parent:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                config_path = candidate
                break
            # Stop at git root
            if (search_dir / ".git").exists():
                break
            search_dir = search_dir.parent

        # Fall back to home directory
        if config_path is None:
            home_config = Path.home() / CONFIG_FILENAME
            if home_config.exists():
                config_path = home_config

    if config_path is None:
        config = Config()
    else:
        try:
            data = yaml.safe_load(config_path.read_text())
            if not isinstance(data, dict):
                data = {}
            config = Config.from_dict(data, source_path=config_path)
        except (yaml.YAMLError, OSError) as e:
            # Log warning but return defaults
            logging.getLogger("vcardctl.core.config").warning(
                f"Failed to load config from {config_path}: {e}"
            )
            config = Config()

    if use_cache:
        _cached_config = config

    return config


def clear_config_cache() -> None:
    """Clear the cached config (useful for testing)."""
    global _cached_config
    _cached_config = None
