"""Configuration manager for loading, saving, and managing solver settings."""
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union
from dataclasses import asdict

from .settings import ApplicationSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Centralized configuration manager for capmesh."""

    DEFAULT_CONFIG_PATHS = [
        "capmesh.json",
        "~/.capmesh/config.json",
        "~/.config/capmesh/config.json"
    ]

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file.
                        If None, default locations are searched. Nothing is
                        written until save() is called.
        """
        self.config_path: Optional[Path] = None
        self.settings: ApplicationSettings = ApplicationSettings()

        if config_path:
            self.config_path = Path(config_path).expanduser().resolve()
        else:
            self.config_path = self._find_config_file()

        if self.config_path and self.config_path.exists():
            self.load()

    def _find_config_file(self) -> Optional[Path]:
        """Find existing configuration file in default locations."""
        for path_str in self.DEFAULT_CONFIG_PATHS:
            path = Path(path_str).expanduser().resolve()
            if path.exists():
                logger.info(f"Found existing config file: {path}")
                return path

        logger.debug("No config file found, using built-in defaults")
        return None

    def load(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Load configuration from file.

        Args:
            config_path: Optional path to load from. Uses instance path if None.

        Returns:
            True if loaded successfully, False otherwise.
        """
        path = Path(config_path).expanduser().resolve() if config_path else self.config_path

        if not path or not path.exists():
            logger.warning(f"Configuration file not found: {path}")
            return False

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load configuration from {path}: {e}")
            return False

        self._update_settings_from_dict(config_data)

        errors = self.validate()
        if any(error_list for error_list in errors.values()):
            logger.warning("Configuration validation errors found:")
            for category, error_list in errors.items():
                for error in error_list:
                    logger.warning(f"  {category}: {error}")

        logger.info(f"Configuration loaded from: {path}")
        return True

    def save(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Save configuration to file.

        Args:
            config_path: Optional path to save to. Uses instance path if None.

        Returns:
            True if saved successfully, False otherwise.
        """
        path = Path(config_path).expanduser().resolve() if config_path else self.config_path

        if not path:
            logger.error("No configuration path specified")
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self.settings), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False

        logger.info(f"Configuration saved to: {path}")
        return True

    def _update_settings_from_dict(self, config_data: Dict[str, Any]):
        """Update settings from dictionary data. Unknown keys are ignored."""
        def update_dataclass(obj, data):
            if not isinstance(data, dict):
                return

            for key, value in data.items():
                if not hasattr(obj, key):
                    logger.warning(f"Ignoring unknown setting: {key}")
                    continue
                attr = getattr(obj, key)
                if hasattr(attr, '__dataclass_fields__'):
                    update_dataclass(attr, value)
                else:
                    setattr(obj, key, value)

        update_dataclass(self.settings, config_data)

    def get_settings(self) -> ApplicationSettings:
        """Get current application settings."""
        return self.settings

    def update_solver_settings(self, **kwargs):
        """Update solver settings."""
        for key, value in kwargs.items():
            if hasattr(self.settings.solver, key):
                setattr(self.settings.solver, key, value)
            else:
                logger.warning(f"Unknown solver setting: {key}")

    def update_visualization_settings(self, **kwargs):
        """Update visualization settings."""
        for key, value in kwargs.items():
            if hasattr(self.settings.visualization, key):
                setattr(self.settings.visualization, key, value)
            else:
                logger.warning(f"Unknown visualization setting: {key}")

    def update_logging_settings(self, **kwargs):
        """Update logging settings."""
        for key, value in kwargs.items():
            if hasattr(self.settings.logging, key):
                setattr(self.settings.logging, key, value)
            else:
                logger.warning(f"Unknown logging setting: {key}")

    def validate(self) -> Dict[str, Any]:
        """Validate current settings."""
        return self.settings.validate()

    def reset_to_defaults(self):
        """Reset all settings to defaults."""
        self.settings = ApplicationSettings()
        logger.info("Settings reset to defaults")

    def reset_category_to_defaults(self, category: str):
        """Reset a specific category to defaults."""
        if category not in ('solver', 'visualization', 'logging'):
            logger.warning(f"Unknown settings category: {category}")
            return

        setattr(self.settings, category, getattr(ApplicationSettings(), category))
        logger.info(f"Reset {category} settings to defaults")

    def get_config_info(self) -> Dict[str, Any]:
        """Get information about current configuration."""
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "config_exists": self.config_path.exists() if self.config_path else False,
            "version": self.settings.version,
            "config_version": self.settings.config_version,
            "validation_errors": self.validate()
        }


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def initialize_config(config_path: Optional[Union[str, Path]] = None,
                      apply_logging: bool = True) -> ConfigManager:
    """Initialize the global configuration manager with optional custom path.

    With ``apply_logging`` the loaded logging section is applied to the
    ``capmesh`` logger tree.
    """
    global _config_manager
    _config_manager = ConfigManager(config_path)
    if apply_logging:
        from ..utils.logging_utils import configure_logging
        configure_logging(_config_manager.settings.logging)
    return _config_manager
