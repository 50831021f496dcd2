"""Tests for the theme CLI commands."""

import pytest
from click.testing import CliRunner

from kidspoints_theme.cli import main


@pytest.fixture
def run(config_file):
    """Invoke the CLI against a temporary config file."""
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(main, ['--config', str(config_file), *args])

    return invoke


class TestThemeCommands:
    """Test the theme command group."""

    def test_list(self, run):
        result = run('theme', 'list')

        assert result.exit_code == 0
        assert 'Predefined Themes' in result.output
        assert 'aqua' in result.output
        assert 'parent' in result.output

    def test_show_child(self, run):
        result = run('theme', 'show', 'child', '--age', 'young')

        assert result.exit_code == 0
        assert 'Young Mode' in result.output
        assert '72px' in result.output

    def test_show_parent(self, run):
        result = run('theme', 'show', 'parent')

        assert result.exit_code == 0
        assert 'parent-professional' in result.output

    def test_show_uses_config_defaults(self, run, config_file):
        config_file.write_text("default_age_group: teen\ndefault_universe: ice\n")
        result = run('theme', 'show', 'child')

        assert result.exit_code == 0
        assert 'child-teen-ice' in result.output

    def test_show_unknown_universe(self, run):
        result = run('theme', 'show', 'child', '--universe', 'desert')

        assert result.exit_code == 2

    def test_palette(self, run):
        result = run('theme', 'palette', 'aqua')

        assert result.exit_code == 0
        assert '#009688' in result.output

    def test_contrast(self, run):
        result = run('theme', 'contrast', '#FFFFFF', '#000000')

        assert result.exit_code == 0
        assert '21.00:1' in result.output

    def test_contrast_invalid_color(self, run):
        result = run('theme', 'contrast', '#FFF', '#000000')

        assert result.exit_code == 1
        assert 'not a hex color' in result.output

    def test_validate(self, run):
        result = run('theme', 'validate')

        assert result.exit_code == 0
        assert 'Validating 12 themes' in result.output
        assert 'Summary' in result.output

    def test_validate_strict_fails_below_threshold(self, run):
        """Test that universes missing AAA text fail the strict run."""
        result = run('theme', 'validate', '--strict')

        assert result.exit_code == 1
        assert 'below 95%' in result.output

    def test_validate_strict_threshold_from_config(self, run, config_file):
        config_file.write_text("fail_below_score: 0\n")
        result = run('theme', 'validate', '--strict')

        assert result.exit_code == 0
