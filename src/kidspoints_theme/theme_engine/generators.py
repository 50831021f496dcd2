"""Theme generators for the child and parent modes.

ChildThemeGenerator adapts touch targets, type scale, corner radii and
animation style to the child's age group and optionally layers a universe
palette. ParentThemeGenerator builds the single professional theme.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .colors import (
    BACKGROUND_SYSTEMS,
    BORDER_SYSTEMS,
    CHILD_CORE_COLORS,
    EXTENDED_COLOR_NAMES,
    GAMIFICATION_COLORS,
    PARENT_CORE_COLORS,
    PARENT_GRAY,
    SHADOW_SYSTEMS,
    STATUS_COLORS,
    TEXT_SYSTEMS,
    glow,
)
from .palette import generate_universe_palette
from .schema import (
    AccessibilityInfo,
    AgeGroup,
    Animations,
    Effects,
    FontFamilies,
    Gradient,
    LineHeights,
    Overlay,
    Palette,
    Persona,
    Shadow,
    Spacing,
    TextPreset,
    ThemeBundle,
    ThemeColors,
    ThemeMetadata,
    TouchTargets,
    Typography,
    UniverseKey,
)
from .utils import (
    adjust_brightness,
    adjust_saturation,
    average_contrast,
    generate_contrasting_text,
    round_half_up,
)

logger = logging.getLogger(__name__)


SPACING_BASE = 4
BASE_FONT_SIZE = 16

TYPE_SCALE = (
    ('xs', 12), ('sm', 14), ('md', BASE_FONT_SIZE), ('lg', 18), ('xl', 20),
    ('2xl', 24), ('3xl', 30), ('4xl', 36), ('5xl', 48), ('6xl', 64),
    ('7xl', 80), ('8xl', 96), ('9xl', 128),
)

FONT_WEIGHTS = {
    'regular': '400',
    'medium': '500',
    'semi_bold': '600',
    'bold': '700',
    'extra_bold': '800',
}

SMOOTH_EASING = 'cubic-bezier(0.4, 0, 0.2, 1)'
BOUNCE_EASING = 'cubic-bezier(0.68, -0.55, 0.265, 1.55)'


@dataclass(frozen=True)
class AgeConfiguration:
    """Interface parameters for one child age group"""
    age_range: str
    touch_target_size: int
    border_radius: Dict[str, int]
    font_scale: float
    line_height: float
    font_weight: str
    animation_duration: int
    bounce: bool
    celebration: bool
    shadow: str


AGE_CONFIGURATIONS: Dict[AgeGroup, AgeConfiguration] = {
    AgeGroup.YOUNG: AgeConfiguration(
        age_range='4-6',
        touch_target_size=72,
        border_radius={'sm': 24, 'md': 32, 'lg': 48, 'full': 9999},
        font_scale=1.4,
        line_height=1.6,
        font_weight='bold',
        animation_duration=600,
        bounce=True,
        celebration=True,
        shadow='lg',
    ),
    AgeGroup.CHILD: AgeConfiguration(
        age_range='7-10',
        touch_target_size=60,
        border_radius={'sm': 16, 'md': 24, 'lg': 32, 'full': 9999},
        font_scale=1.2,
        line_height=1.5,
        font_weight='semibold',
        animation_duration=400,
        bounce=True,
        celebration=True,
        shadow='md',
    ),
    AgeGroup.TEEN: AgeConfiguration(
        age_range='11-16',
        touch_target_size=48,
        border_radius={'sm': 8, 'md': 16, 'lg': 24, 'full': 9999},
        font_scale=1.1,
        line_height=1.4,
        font_weight='medium',
        animation_duration=300,
        bounce=False,
        celebration=True,
        shadow='sm',
    ),
}

AGE_FEATURES: Dict[AgeGroup, List[str]] = {
    AgeGroup.YOUNG: ['Ultra-simple interface', 'Extra-large text', 'Bouncy animations'],
    AgeGroup.CHILD: ['Balanced interface', 'Comfortable text', 'Visual effects'],
    AgeGroup.TEEN: ['Mature interface', 'Refined design', 'Subtle animations'],
}


def _scaled_sizes(scale: float) -> Dict[str, int]:
    return {name: round_half_up(size * scale) for name, size in TYPE_SCALE}


class ChildThemeGenerator:
    """Generates child themes per age group, optionally per universe."""

    @classmethod
    def generate(cls, age_group: Union[AgeGroup, str] = AgeGroup.CHILD,
                 universe: Optional[Union[UniverseKey, str]] = None) -> ThemeBundle:
        """Generate a complete child theme.

        Args:
            age_group: Age group of the child
            universe: Optional universe whose palette colors the theme

        Returns:
            ThemeBundle instance

        Raises:
            ValueError: If age_group or universe is not a known value
        """
        age_group = AgeGroup(age_group)
        universe = UniverseKey(universe) if universe is not None else None

        age_config = AGE_CONFIGURATIONS[age_group]
        palette = generate_universe_palette(universe) if universe else None

        colors = cls._generate_colors(palette)
        typography = cls._generate_typography(age_group, age_config)
        spacing = cls._generate_spacing(age_config)
        animations = cls._generate_animations(age_config)
        effects = cls._generate_effects(age_group, age_config, colors)

        logger.debug(f"Generated child theme for age group '{age_group.value}'"
                     f" (universe: {universe.value if universe else 'none'})")

        return ThemeBundle(
            mode=Persona.CHILD,
            age_group=age_group,
            universe=universe,
            colors=colors,
            palette=palette,
            typography=typography,
            spacing=spacing,
            animations=animations,
            effects=effects,
            metadata=ThemeMetadata(
                name=cls.theme_name(age_group, universe),
                display_name=cls._display_name(age_group, universe),
                description=cls._description(age_config, universe),
                audience=age_config.age_range,
                features=cls._features(age_group, universe),
                accessibility=AccessibilityInfo(
                    contrast_ratio=cls.calculate_average_contrast(colors),
                    touch_target_size=age_config.touch_target_size,
                    reduced_motion=False,
                ),
            ),
        )

    @staticmethod
    def theme_name(age_group: AgeGroup, universe: Optional[UniverseKey] = None) -> str:
        if universe:
            return f"child-{age_group.value}-{universe.value}"
        return f"child-{age_group.value}"

    @classmethod
    def _generate_colors(cls, palette: Optional[Palette]) -> ThemeColors:
        status = STATUS_COLORS[Persona.CHILD]
        text = TEXT_SYSTEMS[Persona.CHILD]
        borders = BORDER_SYSTEMS[Persona.CHILD]

        if palette is not None:
            return ThemeColors(
                primary=palette.primary,
                secondary=palette.secondary,
                accent=palette.accent,
                **status,
                **GAMIFICATION_COLORS,
                background=palette.backgrounds.primary,
                background_secondary=palette.backgrounds.secondary,
                background_tertiary=palette.backgrounds.surface,
                surface=palette.backgrounds.elevated,
                text=palette.text.primary,
                text_secondary=palette.text.secondary,
                text_tertiary=adjust_brightness(palette.text.secondary, 15),
                text_inverse=palette.text.on_primary,
                on_primary=palette.text.on_primary,
                on_secondary=palette.text.on_secondary,
                on_accent=generate_contrasting_text(palette.accent),
                on_success=text['on_success'],
                on_warning=text['on_warning'],
                on_error=text['on_error'],
                border=borders['light'],
                border_strong=borders['strong'],
                hover=adjust_brightness(palette.primary, 10),
                active=adjust_brightness(palette.primary, -10),
                disabled=adjust_saturation(palette.primary, -50),
                focus=palette.accent,
            )

        backgrounds = BACKGROUND_SYSTEMS[Persona.CHILD]
        return ThemeColors(
            primary=CHILD_CORE_COLORS['primary'],
            secondary=CHILD_CORE_COLORS['secondary'],
            accent=CHILD_CORE_COLORS['accent'],
            **status,
            **GAMIFICATION_COLORS,
            background=backgrounds['primary'],
            background_secondary=backgrounds['secondary'],
            background_tertiary=backgrounds['tertiary'],
            surface=backgrounds['elevated'],
            text=text['primary'],
            text_secondary=text['secondary'],
            text_tertiary=text['tertiary'],
            text_inverse=text['inverse'],
            on_primary=text['on_primary'],
            on_secondary=text['on_secondary'],
            on_accent=text['on_accent'],
            on_success=text['on_success'],
            on_warning=text['on_warning'],
            on_error=text['on_error'],
            border=borders['light'],
            border_strong=borders['strong'],
            hover=adjust_brightness(CHILD_CORE_COLORS['primary'], 10),
            active=adjust_brightness(CHILD_CORE_COLORS['primary'], -10),
            disabled=adjust_saturation(CHILD_CORE_COLORS['primary'], -50),
            focus=CHILD_CORE_COLORS['accent'],
            extended={name: CHILD_CORE_COLORS[name] for name in EXTENDED_COLOR_NAMES},
        )

    @staticmethod
    def _generate_typography(age_group: AgeGroup, age_config: AgeConfiguration) -> Typography:
        if age_group == AgeGroup.YOUNG:
            regular = 'Fredoka One, Comic Sans MS, cursive'
        else:
            regular = 'Fredoka, Comic Sans MS, system-ui'

        return Typography(
            font_families=FontFamilies(
                regular=regular,
                medium='Fredoka Medium, system-ui',
                semi_bold='Fredoka SemiBold, system-ui',
                bold='Fredoka Bold, system-ui',
                extra_bold='Fredoka One, system-ui',
                specialty={
                    'display': 'Fredoka One, display',
                    'mono': 'JetBrains Mono, Fira Code, monospace',
                    'handwriting': 'Kalam, Caveat, cursive',
                },
            ),
            sizes=_scaled_sizes(age_config.font_scale),
            line_heights=LineHeights(
                tight=1.25,
                normal=age_config.line_height,
                relaxed=round(age_config.line_height + 0.2, 2),
            ),
            weights=dict(FONT_WEIGHTS),
        )

    @staticmethod
    def _generate_spacing(age_config: AgeConfiguration) -> Spacing:
        base = SPACING_BASE
        touch = age_config.touch_target_size

        return Spacing(
            scale={
                'xs': base,
                'sm': base * 2,
                'md': base * 4,
                'lg': base * 6,
                'xl': base * 8,
                '2xl': base * 12,
                '3xl': base * 16,
                '4xl': base * 24,
            },
            touch_target=TouchTargets(
                min=touch,
                comfortable=touch * 1.2,
                generous=touch * 1.5,
            ),
            border_radius=dict(age_config.border_radius),
            layout={
                'card_padding': base * 6,
                'section_spacing': base * 8,
                'container_padding': base * 4,
            },
        )

    @staticmethod
    def _generate_animations(age_config: AgeConfiguration) -> Animations:
        duration = age_config.animation_duration
        return Animations(
            durations={
                'instant': 100,
                'fast': 200,
                'normal': duration,
                'slow': round_half_up(duration * 1.5),
                'celebration': 1500,
            },
            easings={
                'smooth': SMOOTH_EASING,
                'bounce': BOUNCE_EASING if age_config.bounce else SMOOTH_EASING,
                'elastic': 'cubic-bezier(0.175, 0.885, 0.32, 1.275)',
                'spring': 'cubic-bezier(0.175, 0.885, 0.32, 1.0)',
            },
            celebration=age_config.celebration,
            reduced_motion=False,
            cues={
                'points_earned': 'bounce + sparkle',
                'level_up': 'celebration + confetti',
                'mission_complete': 'elastic + glow',
                'badge_unlocked': 'bounce + shine',
            },
        )

    @staticmethod
    def _generate_effects(age_group: AgeGroup, age_config: AgeConfiguration,
                          colors: ThemeColors) -> Effects:
        return Effects(
            shadows=dict(SHADOW_SYSTEMS[Persona.CHILD]),
            active_shadow=age_config.shadow,
            glow={
                'primary': glow(colors.primary),
                'secondary': glow(colors.secondary),
                'accent': glow(colors.accent),
                'success': glow(colors.success),
                'achievement': glow(colors.achievement, blur_radius=30, opacity=0.38),
            },
            gradients={
                'primary': Gradient(angle=135, stops=[colors.primary, adjust_brightness(colors.primary, -20)]),
                'rainbow': Gradient(angle=90, stops=['#FF6B6B', '#4D96FF', '#6BCB77', '#FFD93D', '#BB6BD9']),
                'celebration': Gradient(angle=45, stops=['#FFD700', '#FFA500', '#FF6347']),
            },
            patterns=['dots', 'stars', 'confetti'] if age_group == AgeGroup.YOUNG else None,
        )

    @staticmethod
    def _display_name(age_group: AgeGroup, universe: Optional[UniverseKey]) -> str:
        if universe:
            return f"{age_group.value.capitalize()} - {universe.value.capitalize()}"
        return f"{age_group.value.capitalize()} Mode"

    @staticmethod
    def _description(age_config: AgeConfiguration, universe: Optional[UniverseKey]) -> str:
        suffix = f" with the {universe.value.capitalize()} universe" if universe else ""
        return f"Interface tuned for children aged {age_config.age_range}{suffix}"

    @staticmethod
    def _features(age_group: AgeGroup, universe: Optional[UniverseKey]) -> List[str]:
        features = [
            'WCAG AAA contrast',
            'Playful animations',
            'Adaptive touch targets',
            'Built-in gamification',
        ]
        features.extend(AGE_FEATURES[age_group])
        if universe:
            features.append(f"Immersive {universe.value} universe")
        return features

    @staticmethod
    def calculate_average_contrast(colors: ThemeColors) -> float:
        """Average contrast of text/background and text-on-color pairs."""
        return average_contrast([
            (colors.text, colors.background),
            (colors.on_primary, colors.primary),
            (colors.on_secondary, colors.secondary),
        ])


PARENT_TOUCH_TARGET = 44

PARENT_TYPE_SIZES = {
    'xs': 12, 'sm': 14, 'md': BASE_FONT_SIZE, 'lg': 18, 'xl': 20,
    '2xl': 24, '3xl': 28, '4xl': 32, '5xl': 36, '6xl': 48,
    '7xl': 56, '8xl': 64, '9xl': 72,
}

PARENT_SPACING_STEPS = (
    0, 0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16,
    20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96,
)

PARENT_FEATURES = [
    'Professional interface',
    'Maximum WCAG AAA contrast',
    'Full keyboard navigation',
    'Screen reader support',
    'Respectful animations',
    'Adjustable density',
    'Dark mode available',
    'Keyboard shortcuts',
    'Optimized for productivity',
    'Advanced tables and lists',
]


class ParentThemeGenerator:
    """Generates the professional parent theme."""

    THEME_NAME = 'parent-professional'

    @classmethod
    def generate(cls) -> ThemeBundle:
        """Generate the parent theme."""
        colors = cls._generate_colors()

        return ThemeBundle(
            mode=Persona.PARENT,
            colors=colors,
            typography=cls._generate_typography(),
            spacing=cls._generate_spacing(),
            animations=cls._generate_animations(),
            effects=cls._generate_effects(colors),
            metadata=ThemeMetadata(
                name=cls.THEME_NAME,
                display_name='Parent Mode',
                description='Professional interface for managing and supervising missions',
                audience='Parents and supervisors',
                features=list(PARENT_FEATURES),
                accessibility=AccessibilityInfo(
                    contrast_ratio=cls.calculate_average_contrast(colors),
                    touch_target_size=PARENT_TOUCH_TARGET,
                    reduced_motion=True,
                    screen_reader=True,
                    keyboard_navigation=True,
                    high_contrast=True,
                ),
                productivity={
                    'optimized_for_scanning': True,
                    'quick_actions': True,
                    'density_options': ['comfortable', 'compact'],
                    'keyboard_shortcuts': True,
                },
            ),
        )

    @staticmethod
    def _generate_colors() -> ThemeColors:
        text = TEXT_SYSTEMS[Persona.PARENT]
        backgrounds = BACKGROUND_SYSTEMS[Persona.PARENT]
        borders = BORDER_SYSTEMS[Persona.PARENT]
        primary = PARENT_CORE_COLORS['primary']

        # Gamification is toned down for the professional mode
        gamification = {
            name: adjust_saturation(color, -20) for name, color in GAMIFICATION_COLORS.items()
        }

        return ThemeColors(
            primary=primary,
            secondary=PARENT_CORE_COLORS['secondary'],
            accent=PARENT_CORE_COLORS['accent'],
            **STATUS_COLORS[Persona.PARENT],
            **gamification,
            background=backgrounds['primary'],
            background_secondary=backgrounds['secondary'],
            background_tertiary=backgrounds['tertiary'],
            surface=backgrounds['elevated'],
            text=text['primary'],
            text_secondary=text['secondary'],
            text_tertiary=text['tertiary'],
            text_inverse=text['inverse'],
            on_primary=text['on_primary'],
            on_secondary=text['on_secondary'],
            on_accent=text['on_accent'],
            on_success=text['on_success'],
            on_warning=text['on_warning'],
            on_error=text['on_error'],
            border=borders['light'],
            border_medium=borders['medium'],
            border_strong=borders['strong'],
            hover=adjust_brightness(primary, 5),
            active=adjust_brightness(primary, -5),
            disabled=PARENT_GRAY[400],
            focus=PARENT_CORE_COLORS['accent'],
            gray=dict(PARENT_GRAY),
            semantics={
                'pending': '#FFA726',
                'approved': '#66BB6A',
                'rejected': '#EF5350',
                'draft': '#BDBDBD',
                'high_priority': '#F44336',
                'medium_priority': '#FF9800',
                'low_priority': '#4CAF50',
                'chores': '#795548',
                'homework': '#3F51B5',
                'behavior': '#9C27B0',
                'sports': '#4CAF50',
                'creative': '#FF5722',
            },
            dark={
                'background': '#121212',
                'background_secondary': '#1E1E1E',
                'background_tertiary': '#2D2D2D',
                'surface': '#1E1E1E',
                'text': '#FFFFFF',
                'text_secondary': '#B3B3B3',
                'text_tertiary': '#808080',
                'border': '#404040',
            },
        )

    @staticmethod
    def _generate_typography() -> Typography:
        return Typography(
            font_families=FontFamilies(
                regular='Inter, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif',
                medium='Inter Medium, system-ui',
                semi_bold='Inter SemiBold, system-ui',
                bold='Inter Bold, system-ui',
                extra_bold='Inter ExtraBold, system-ui',
                specialty={
                    'light': 'Inter Light, system-ui',
                    'display': 'Inter Display, system-ui',
                    'mono': 'JetBrains Mono, "Fira Code", "SF Mono", Monaco, monospace',
                    'system': 'system-ui, -apple-system, sans-serif',
                },
            ),
            sizes=dict(PARENT_TYPE_SIZES),
            line_heights=LineHeights(tight=1.25, normal=1.5, relaxed=1.75),
            weights={'light': '300', **FONT_WEIGHTS},
            presets={
                'h1': TextPreset(font_size=32, font_weight='700', line_height=1.25, letter_spacing='-0.025em'),
                'h2': TextPreset(font_size=28, font_weight='600', line_height=1.25, letter_spacing='-0.025em'),
                'h3': TextPreset(font_size=24, font_weight='600', line_height=1.3),
                'h4': TextPreset(font_size=20, font_weight='600', line_height=1.4),
                'body': TextPreset(font_size=16, font_weight='400', line_height=1.5),
                'body_small': TextPreset(font_size=14, font_weight='400', line_height=1.4),
                'caption': TextPreset(font_size=12, font_weight='400', line_height=1.3, color='#6B7280'),
                'label': TextPreset(font_size=14, font_weight='500', line_height=1.4),
                'button': TextPreset(font_size=16, font_weight='500', line_height=1.25, letter_spacing='0.025em'),
            },
        )

    @staticmethod
    def _generate_spacing() -> Spacing:
        base = SPACING_BASE
        scale = {'px': 1}
        scale.update({f"{step:g}": base * step for step in PARENT_SPACING_STEPS})

        return Spacing(
            scale=scale,
            touch_target=TouchTargets(min=PARENT_TOUCH_TARGET, comfortable=48, generous=56),
            border_radius={'sm': 4, 'md': 8, 'lg': 12, 'xl': 16, 'full': 9999},
            layout={
                'card_padding': base * 6,
                'section_spacing': base * 8,
                'container_padding': base * 6,
                'table_row_height': base * 12,
                'form_spacing': base * 4,
            },
        )

    @staticmethod
    def _generate_animations() -> Animations:
        return Animations(
            durations={'instant': 0, 'fast': 150, 'normal': 200, 'slow': 300, 'lazy': 500},
            easings={
                'linear': 'linear',
                'smooth': SMOOTH_EASING,
                'smooth_out': 'cubic-bezier(0.0, 0, 0.2, 1)',
                'smooth_in': 'cubic-bezier(0.4, 0, 1, 1)',
                'smooth_in_out': SMOOTH_EASING,
            },
            celebration=False,
            reduced_motion=True,
            cues={
                'success': 'fade + gentle-scale',
                'error': 'shake + highlight',
                'loading': 'pulse',
                'hover': 'lift',
                'focus': 'glow',
            },
        )

    @staticmethod
    def _generate_effects(colors: ThemeColors) -> Effects:
        return Effects(
            shadows=dict(SHADOW_SYSTEMS[Persona.PARENT]),
            active_shadow='sm',
            glow={
                'focus_ring': Shadow(offset_y=0, blur_radius=0, spread=3, color=colors.accent, opacity=0.25),
            },
            gradients={
                'subtle': Gradient(angle=135, stops=[colors.background, colors.background_secondary]),
                'header': Gradient(angle=90, stops=[colors.primary, adjust_brightness(colors.primary, -10)]),
                'card': Gradient(angle=145, stops=[colors.surface, adjust_brightness(colors.surface, -2)]),
            },
            overlays={
                'modal': Overlay(color='#000000', opacity=0.6),
                'tooltip': Overlay(color='#000000', opacity=0.9),
                'loading': Overlay(color='#FFFFFF', opacity=0.8),
            },
            hover={
                'card': adjust_brightness(colors.surface, -2),
                'button': adjust_brightness(colors.primary, 5),
                'row': colors.gray[50],
            },
        )

    @staticmethod
    def calculate_average_contrast(colors: ThemeColors) -> float:
        """Average contrast including the secondary text pair."""
        return average_contrast([
            (colors.text, colors.background),
            (colors.on_primary, colors.primary),
            (colors.on_secondary, colors.secondary),
            (colors.text_secondary, colors.background),
        ])
