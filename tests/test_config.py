"""Tests for configuration loading and saving."""

import logging

from kidspoints_theme.config import (
    Config,
    ThemeConfig,
    get_config,
    load_config,
    save_config,
)
from kidspoints_theme.theme_engine import AgeGroup, Persona, UniverseKey


class TestThemeConfig:
    """Test the configuration model."""

    def test_defaults(self):
        config = ThemeConfig()

        assert config.default_persona == Persona.CHILD
        assert config.default_age_group == AgeGroup.CHILD
        assert config.default_universe is None
        assert config.cache_themes
        assert config.fail_below_score == 95

    def test_yaml_round_trip(self):
        config = ThemeConfig(
            default_persona=Persona.PARENT,
            default_age_group=AgeGroup.TEEN,
            default_universe=UniverseKey.ICE,
            cache_themes=False,
            log_level="DEBUG",
            fail_below_score=80,
        )

        assert ThemeConfig.from_yaml(config.to_yaml()) == config

    def test_yaml_uses_plain_values(self):
        text = ThemeConfig(default_universe=UniverseKey.CANDY).to_yaml()

        assert "default_universe: candy" in text
        assert "default_persona: child" in text

    def test_invalid_enum_falls_back(self, caplog):
        """Test that unknown values are replaced by defaults."""
        with caplog.at_level(logging.WARNING):
            config = ThemeConfig.from_yaml(
                "default_persona: grandparent\ndefault_age_group: toddler\ndefault_universe: desert\n"
            )

        assert config.default_persona == Persona.CHILD
        assert config.default_age_group == AgeGroup.CHILD
        assert config.default_universe is None
        assert "Invalid default_persona 'grandparent'" in caplog.text

    def test_unknown_keys_ignored(self):
        config = ThemeConfig.from_yaml("theme_name: dracula\ncache_themes: false\n")

        assert not config.cache_themes

    def test_empty_document(self):
        assert ThemeConfig.from_yaml("") == ThemeConfig()


class TestConfigManager:
    """Test loading, caching and saving configuration files."""

    def test_missing_file_uses_defaults(self, config_file):
        """Test that loading never creates the file."""
        config = load_config(config_file)

        assert config == ThemeConfig()
        assert not config_file.exists()

    def test_save_and_reload(self, config_file):
        save_config(ThemeConfig(default_age_group=AgeGroup.YOUNG), config_file)

        assert config_file.exists()
        config = Config.reload(config_file)
        assert config.default_age_group == AgeGroup.YOUNG

    def test_instance_is_cached(self, config_file):
        config_file.write_text("log_level: INFO\n")
        first = load_config(config_file)

        assert get_config() is first
        assert load_config(config_file) is first

    def test_other_path_is_loaded(self, config_file, tmp_path):
        """Test that an explicit new path replaces the cached settings."""
        config_file.write_text("fail_below_score: 80\n")
        other = tmp_path / "other.yaml"
        other.write_text("fail_below_score: 60\n")

        assert load_config(config_file).fail_below_score == 80
        assert load_config(other).fail_below_score == 60
        assert get_config().fail_below_score == 60
        assert load_config().fail_below_score == 60

    def test_broken_file_uses_defaults(self, config_file, caplog):
        config_file.write_text("default_persona: [unclosed\n")

        with caplog.at_level(logging.WARNING, logger='kidspoints_theme.config'):
            config = load_config(config_file)

        assert config == ThemeConfig()
        assert "Failed to load config" in caplog.text

    def test_non_mapping_uses_defaults(self, config_file):
        config_file.write_text("- just\n- a list\n")

        assert load_config(config_file) == ThemeConfig()
