"""
Configuration management for the medication search engine.

Handles loading, validating and persisting the YAML configuration that
points the catalog at its dataset and bounds search output.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Default config path relative to project root
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / 'config' / 'search_config.yaml'


class ConfigManager:
    """
    Manages catalog and search configuration.

    Values from the YAML file are merged over DEFAULT_CONFIG section by
    section, so a partial file only overrides what it names.
    """

    DEFAULT_CONFIG = {
        'catalog': {
            'asset_path': 'ckd_medications_eu_us.json',
            'data_dir': None,  # None = dataset bundled with the package
        },
        'search': {
            'max_results': 10,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = config_path
        self.config: dict[str, Any] = {}

        if config_path and config_path.exists():
            self.load_config(config_path)
        else:
            logger.info("No config file found, using defaults")
            self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)

    @classmethod
    def from_default_path(cls) -> 'ConfigManager':
        """
        Build from config/search_config.yaml, falling back to defaults.

        A broken file is logged and ignored rather than raised.
        """
        try:
            return cls(DEFAULT_CONFIG_PATH)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {DEFAULT_CONFIG_PATH}: {e}. Using defaults.")
            return cls()

    def load_config(self, path: Path) -> dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            Loaded configuration dictionary

        Raises:
            FileNotFoundError: If config file does not exist
            yaml.YAMLError: If config file is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                loaded_config = yaml.safe_load(f)

            if not loaded_config:
                logger.warning(f"Empty config file at {path}, using defaults")
                self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)
            else:
                self.config = self._merge_with_defaults(loaded_config)

            self.config_path = path
            logger.info(f"Loaded configuration from {path}")

            return self.config

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise

    def get_catalog_param(self, name: str) -> Any:
        """
        Get a catalog parameter by name.

        Raises:
            KeyError: If parameter not found
        """
        if name not in self.config.get('catalog', {}):
            raise KeyError(f"Catalog parameter '{name}' not found in configuration")

        return self.config['catalog'][name]

    def get_search_param(self, name: str) -> Any:
        """
        Get a search parameter by name.

        Raises:
            KeyError: If parameter not found
        """
        if name not in self.config.get('search', {}):
            raise KeyError(f"Search parameter '{name}' not found in configuration")

        return self.config['search'][name]

    def update_search_param(self, name: str, value: Any) -> None:
        """Set a search parameter, e.g. ``max_results``."""
        self.config.setdefault('search', {})
        old_value = self.config['search'].get(name)
        self.config['search'][name] = value

        logger.info(f"Updated search parameter '{name}': {old_value} -> {value}")

    def save_config(self, path: Optional[Path] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Path to save to (uses self.config_path if not provided)

        Raises:
            ValueError: If no path provided and no config_path set
        """
        save_path = path or self.config_path

        if not save_path:
            raise ValueError("No path provided and no config_path set")

        try:
            save_path.parent.mkdir(parents=True, exist_ok=True)

            with open(save_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(
                    self.config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            logger.info(f"Saved configuration to {save_path}")

        except Exception as e:
            logger.error(f"Failed to save configuration: {e}")
            raise

    def get_all_config(self) -> dict[str, Any]:
        """Get a copy of the complete configuration dictionary."""
        return self._deep_copy_dict(self.config)

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)
        logger.info("Configuration reset to defaults")

    def _merge_with_defaults(self, loaded_config: dict) -> dict:
        """Merge loaded config with defaults to ensure all keys exist."""
        merged = self._deep_copy_dict(self.DEFAULT_CONFIG)

        for section, values in loaded_config.items():
            if section in merged and isinstance(values, dict):
                merged[section].update(values)
            else:
                merged[section] = values

        return merged

    def _deep_copy_dict(self, d: dict) -> dict:
        return copy.deepcopy(d)

    def validate_config(self) -> list[str]:
        """
        Validate the current configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        catalog = self.config.get('catalog', {})
        asset_path = catalog.get('asset_path')
        if not isinstance(asset_path, str) or not asset_path.strip():
            errors.append("catalog.asset_path must be a non-empty string")

        data_dir = catalog.get('data_dir')
        if data_dir is not None and not isinstance(data_dir, str):
            errors.append(f"catalog.data_dir must be a string or null, got {type(data_dir).__name__}")

        max_results = self.config.get('search', {}).get('max_results')
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
            errors.append("search.max_results must be a positive integer")

        return errors
