"""Configuration management for the Kids Points theme engine."""

import logging
import os
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional
import yaml

from .theme_engine.schema import AgeGroup, Persona, UniverseKey

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.kidspoints/theme.yaml"


@dataclass
class ThemeConfig:
    """Global configuration model for the theme engine."""

    # Theme selection used when the caller gives none
    default_persona: Persona = Persona.CHILD
    default_age_group: AgeGroup = AgeGroup.CHILD
    default_universe: Optional[UniverseKey] = None

    # Engine behavior
    cache_themes: bool = True

    # Tooling
    log_level: str = "WARNING"
    fail_below_score: int = 95  # validate --strict threshold

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "default_persona": self.default_persona.value,
            "default_age_group": self.default_age_group.value,
            "default_universe": self.default_universe.value if self.default_universe else None,
            "cache_themes": self.cache_themes,
            "log_level": self.log_level,
            "fail_below_score": self.fail_below_score,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ThemeConfig":
        """Deserialize config from YAML.

        Unknown keys are ignored and unknown enum values fall back to the
        defaults, both with a warning.
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top level, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        for key in set(data) - known:
            logger.warning(f"Ignoring unknown config key: {key}")
            del data[key]

        for key, enum_type, default in (
            ("default_persona", Persona, Persona.CHILD),
            ("default_age_group", AgeGroup, AgeGroup.CHILD),
        ):
            if key in data:
                try:
                    data[key] = enum_type(data[key])
                except ValueError:
                    logger.warning(f"Invalid {key} '{data[key]}', using '{default.value}'")
                    data[key] = default

        if data.get("default_universe") is not None:
            try:
                data["default_universe"] = UniverseKey(data["default_universe"])
            except ValueError:
                logger.warning(f"Invalid default_universe '{data['default_universe']}', using none")
                data["default_universe"] = None

        return cls(**data)

    @staticmethod
    def get_config_path() -> Path:
        """Get the default config file path."""
        return Path(os.path.expanduser(DEFAULT_CONFIG_PATH))


class Config:
    """Configuration manager for the theme engine."""

    _instance: Optional[ThemeConfig] = None
    _path: Optional[Path] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ThemeConfig:
        """Load configuration from file, or use defaults.

        A missing file is not created; call save() to write one. The loaded
        configuration is cached; an explicit path other than the cached
        one loads that file instead.
        """
        if cls._instance is not None:
            if config_path is None or Path(config_path) == cls._path:
                return cls._instance

        config = ThemeConfig()

        if config_path is None:
            config_path = ThemeConfig.get_config_path()
        config_path = Path(config_path)

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_content = f.read()
                config = ThemeConfig.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")
                logger.warning("Using default configuration.")
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        cls._path = config_path
        return config

    @classmethod
    def save(cls, config: ThemeConfig, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = ThemeConfig.get_config_path()
        config_path = Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_path, 'w') as f:
                f.write(config.to_yaml())
            logger.info(f"Configuration saved to {config_path}")
        except OSError as e:
            logger.error(f"Failed to save config to {config_path}: {e}")
            raise

    @classmethod
    def get(cls) -> ThemeConfig:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ThemeConfig:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ThemeConfig:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ThemeConfig:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ThemeConfig, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
