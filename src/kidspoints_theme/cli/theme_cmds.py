"""Theme inspection CLI commands.

This module provides CLI commands for listing the predefined themes,
showing a generated theme, inspecting universe palettes, checking color
contrast and running the validation report.
"""

import click
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ..theme_engine import (
    AgeGroup,
    Persona,
    ThemeEngine,
    ThemeValidator,
    UniverseKey,
    WCAGLevel,
    calculate_contrast_ratio,
    generate_universe_palette,
    hex_to_rgb,
    validate_palette,
)
from ..theme_engine.utils import WCAG_AA_RATIO, WCAG_AAA_RATIO, normalize_hex
from ..config import get_config

PERSONAS = [p.value for p in Persona]
AGE_GROUPS = [a.value for a in AgeGroup]
UNIVERSES = [u.value for u in UniverseKey]


def _swatch(color: str) -> Text:
    """Color sample followed by its hex value."""
    return Text.assemble(("    ", f"on {color}"), " ", color)


def _pass_fail(ok: bool) -> str:
    return "[green]pass[/green]" if ok else "[red]fail[/red]"


@click.group()
def theme():
    """Inspect and validate themes."""
    pass


@theme.command(name='list')
def list_themes():
    """List all predefined themes."""
    try:
        engine = ThemeEngine.from_config(get_config())
        console = Console()

        table = Table(
            title="Predefined Themes",
            show_header=True,
            header_style="bold"
        )

        table.add_column("Key", style="cyan", min_width=10)
        table.add_column("Category", style="blue")
        table.add_column("Name", style="default")
        table.add_column("Contrast", justify="right")
        table.add_column("Score", justify="right", style="magenta")

        for theme_info in engine.list_themes():
            info = engine.get_theme_info(theme_info['key'])
            if info.get('error'):
                continue

            table.add_row(
                info['key'],
                info['category'],
                info['name'],
                f"{info['contrast_ratio']}:1",
                f"{info['score']}%",
            )

        console.print()
        console.print(table)
        console.print()

    except Exception as e:
        console = Console()
        console.print(f"[red]Error listing themes: {e}[/red]")
        sys.exit(1)


@theme.command()
@click.argument('persona', type=click.Choice(PERSONAS))
@click.option('--age', type=click.Choice(AGE_GROUPS), help='Child age group')
@click.option('--universe', type=click.Choice(UNIVERSES), help='Child universe')
def show(persona: str, age: Optional[str], universe: Optional[str]):
    """Show a generated theme."""
    try:
        config = get_config()
        engine = ThemeEngine.from_config(config)
        console = Console()

        if persona == Persona.CHILD.value:
            age = age or config.default_age_group
            universe = universe or config.default_universe

        bundle = engine.get_theme(persona, age, universe)
        metadata = bundle.metadata

        console.print(f"\n[bold]Theme: {metadata.display_name}[/bold] ({metadata.name})\n")

        info_table = Table(show_header=False, box=None, padding=(0, 2))
        info_table.add_column("Property", style="blue", min_width=15)
        info_table.add_column("Value", style="default")

        info_table.add_row("Audience", metadata.audience)
        info_table.add_row("Font", bundle.typography.font_families.regular)
        info_table.add_row("Base size", f"{bundle.typography.sizes['md']}px")
        info_table.add_row("Touch target", f"{bundle.spacing.touch_target.min:g}px")
        info_table.add_row("Animation", f"{bundle.animations.durations['normal']}ms")
        info_table.add_row("Contrast", f"{metadata.accessibility.contrast_ratio}:1")
        info_table.add_row("Reduced motion", "yes" if bundle.animations.reduced_motion else "no")

        console.print(info_table)

        colors = bundle.colors
        color_table = Table(title="Colors", show_header=True, header_style="bold")
        color_table.add_column("Role", style="cyan")
        color_table.add_column("Color")
        color_table.add_column("Text on it")

        for role, value, on_value in (
            ("primary", colors.primary, colors.on_primary),
            ("secondary", colors.secondary, colors.on_secondary),
            ("accent", colors.accent, colors.on_accent),
            ("success", colors.success, colors.on_success),
            ("warning", colors.warning, colors.on_warning),
            ("error", colors.error, colors.on_error),
            ("background", colors.background, colors.text),
        ):
            color_table.add_row(role, _swatch(value), on_value)

        console.print()
        console.print(color_table)

        if metadata.description:
            console.print(Panel(
                metadata.description,
                title="[blue]Description[/blue]",
                border_style="blue"
            ))

        if metadata.features:
            console.print("[bold]Features:[/bold]")
            for feature in metadata.features:
                console.print(f"  - {feature}")

    except ValueError as e:
        console = Console()
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@theme.command()
@click.argument('universe', type=click.Choice(UNIVERSES))
def palette(universe: str):
    """Show the palette of a universe."""
    try:
        console = Console()
        universe_palette = generate_universe_palette(universe)

        table = Table(title=f"Universe: {universe}", show_header=True, header_style="bold")
        table.add_column("Role", style="cyan")
        table.add_column("Color")

        table.add_row("primary", _swatch(universe_palette.primary))
        table.add_row("secondary", _swatch(universe_palette.secondary))
        table.add_row("accent", _swatch(universe_palette.accent))
        table.add_row("background", _swatch(universe_palette.backgrounds.primary))
        table.add_row("on primary", _swatch(universe_palette.text.on_primary))
        table.add_row("on secondary", _swatch(universe_palette.text.on_secondary))

        ramp = Table(title="Variations", show_header=True, header_style="bold")
        ramp.add_column("Step", justify="right", style="cyan")
        ramp.add_column("Color")
        for step, color in universe_palette.variations.items():
            ramp.add_row(str(step), _swatch(color))

        console.print()
        console.print(table)
        console.print(ramp)

        result = validate_palette(universe_palette)
        if result.is_valid:
            console.print("[green]All text pairs meet WCAG AAA[/green]")
        else:
            for error in result.errors:
                console.print(f"[yellow]{error}[/yellow]")

    except Exception as e:
        console = Console()
        console.print(f"[red]Error building palette: {e}[/red]")
        sys.exit(1)


@theme.command()
@click.argument('foreground')
@click.argument('background')
def contrast(foreground: str, background: str):
    """Check the WCAG contrast of two hex colors."""
    console = Console()

    for color in (foreground, background):
        if hex_to_rgb(color) is None:
            console.print(f"[red]Error: '{color}' is not a hex color[/red]")
            sys.exit(1)

    ratio = calculate_contrast_ratio(foreground, background)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Check", style="blue", min_width=12)
    table.add_column("Result")

    table.add_row("Foreground", _swatch(normalize_hex(foreground)))
    table.add_row("Background", _swatch(normalize_hex(background)))
    table.add_row("Ratio", f"{ratio:.2f}:1")
    table.add_row("WCAG AA", _pass_fail(ratio >= WCAG_AA_RATIO))
    table.add_row("WCAG AAA", _pass_fail(ratio >= WCAG_AAA_RATIO))

    console.print(table)


@theme.command()
@click.option('--strict', is_flag=True, help='Exit with an error if a theme scores below the configured threshold')
def validate(strict: bool):
    """Validate all predefined themes."""
    try:
        config = get_config()
        engine = ThemeEngine.from_config(config)
        console = Console()

        themes = [entry.theme for entry in engine.iter_themes()]
        report = ThemeValidator.generate_complete_report(themes)

        console.print(f"\n[bold]Validating {report.summary.total_themes} themes...[/bold]\n")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Theme", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("WCAG")
        table.add_column("Harmony", justify="right")
        table.add_column("Issues")

        for theme_report in report.themes:
            level_style = "green" if theme_report.wcag_level == WCAGLevel.AAA else "yellow"
            table.add_row(
                theme_report.theme_name,
                f"{theme_report.score}%",
                f"[{level_style}]{theme_report.wcag_level.value}[/{level_style}]",
                str(theme_report.color_harmony.score),
                "\n".join(theme_report.issues) or "-",
            )

        console.print(table)

        summary = report.summary
        console.print(Panel(
            Text.assemble(
                ("WCAG AAA: ", "dim"), f"{summary.wcag_aaa_compliant}/{summary.total_themes}\n",
                ("Average score: ", "dim"), f"{summary.average_score}%\n",
                ("Best: ", "dim"), summary.best_theme, "\n",
                ("Worst: ", "dim"), summary.worst_theme,
            ),
            title="[blue]Summary[/blue]",
            border_style="blue",
            padding=(1, 2)
        ))

        for recommendation in report.recommendations:
            console.print(f"  - {recommendation}")

        failing = [r.theme_name for r in report.themes if r.score < config.fail_below_score]
        if strict and failing:
            console.print(f"\n[red]{len(failing)} theme(s) below {config.fail_below_score}%: "
                          f"{', '.join(failing)}[/red]")
            sys.exit(1)

    except Exception as e:
        console = Console()
        console.print(f"[red]Error validating themes: {e}[/red]")
        sys.exit(1)
