"""Core color systems for the child and parent modes.

Fixed base colors and the systems derived from them (text, borders,
shadows). Everything here is a pure function of the constants; validation
of the systems is an explicit call, see validate_color_systems().
"""

import logging
from typing import Dict

from .schema import Persona, Shadow
from .utils import (
    adjust_brightness,
    generate_color_variations,
    generate_contrasting_text,
    meets_aaa,
)

logger = logging.getLogger(__name__)

# Alpha used by the colored shadows and glows (0x40 / 0xFF)
TINT_OPACITY = 0.25


CHILD_CORE_COLORS: Dict[str, str] = {
    'primary': '#0D47A1',      # Blue 900
    'secondary': '#1B5E20',    # Green 900
    'accent': '#E65100',       # Orange 900

    'red': '#D32F2F',
    'blue': '#1976D2',
    'green': '#388E3C',
    'yellow': '#F57C00',       # pure yellow cannot carry text
    'purple': '#7B1FA2',
    'orange': '#F57C00',
    'pink': '#C2185B',
    'teal': '#00695C',
}

EXTENDED_COLOR_NAMES = ('red', 'blue', 'green', 'yellow', 'purple', 'orange', 'pink', 'teal')

CHILD_COLOR_VARIATIONS: Dict[str, Dict[int, str]] = {
    'primary': generate_color_variations('#1976D2'),
    'secondary': generate_color_variations('#388E3C'),
    'accent': generate_color_variations('#F57C00'),
    'red': generate_color_variations('#D32F2F'),
    'purple': generate_color_variations('#7B1FA2'),
    'orange': generate_color_variations('#F57C00'),
    'pink': generate_color_variations('#C2185B'),
    'teal': generate_color_variations('#00695C'),
}

PARENT_GRAY: Dict[int, str] = {
    50: '#FAFAFA',
    100: '#F5F5F5',
    200: '#EEEEEE',
    300: '#E0E0E0',
    400: '#BDBDBD',
    500: '#9E9E9E',
    600: '#757575',
    700: '#616161',
    800: '#424242',
    900: '#212121',
}

PARENT_CORE_COLORS: Dict[str, str] = {
    'primary': '#0D47A1',
    'secondary': '#1B5E20',
    'accent': '#E65100',
    'success': '#2E7D32',
    'warning': '#F57C00',
    'error': '#D32F2F',
    'info': '#1976D2',
}

STATUS_COLORS: Dict[Persona, Dict[str, str]] = {
    Persona.CHILD: {
        'success': CHILD_CORE_COLORS['green'],
        'warning': CHILD_CORE_COLORS['yellow'],
        'error': CHILD_CORE_COLORS['red'],
        'info': CHILD_CORE_COLORS['blue'],
    },
    Persona.PARENT: {
        'success': PARENT_CORE_COLORS['success'],
        'warning': PARENT_CORE_COLORS['warning'],
        'error': PARENT_CORE_COLORS['error'],
        'info': PARENT_CORE_COLORS['info'],
    },
}

GAMIFICATION_COLORS: Dict[str, str] = {
    'points': '#FFD700',
    'experience': '#9C27B0',
    'level': '#4CAF50',
    'achievement': '#FF6D00',
    'streak': '#F44336',
    'badge': '#2196F3',
}

BACKGROUND_SYSTEMS: Dict[Persona, Dict[str, str]] = {
    Persona.CHILD: {
        'primary': '#FFFFFF',
        'secondary': '#FAFAFA',
        'tertiary': '#F5F5F5',
        'elevated': '#FFFFFF',
        'playful': '#FFF3E0',
        'success': '#E8F5E8',
        'warning': '#FFF8E1',
        'error': '#FFEBEE',
        'info': '#E3F2FD',
    },
    Persona.PARENT: {
        'primary': '#FFFFFF',
        'secondary': PARENT_GRAY[50],
        'tertiary': PARENT_GRAY[100],
        'elevated': '#FFFFFF',
        'success': '#E8F5E8',
        'warning': '#FFF8E1',
        'error': '#FFEBEE',
        'info': '#E3F2FD',
    },
}


def _text_system(background: str, core: Dict[str, str], status: Dict[str, str]) -> Dict[str, str]:
    text = generate_contrasting_text(background)
    return {
        'primary': text,
        'secondary': adjust_brightness(text, 15),
        'tertiary': adjust_brightness(text, 30),
        'inverse': generate_contrasting_text('#000000'),
        'on_primary': generate_contrasting_text(core['primary']),
        'on_secondary': generate_contrasting_text(core['secondary']),
        'on_accent': generate_contrasting_text(core['accent']),
        'on_success': generate_contrasting_text(status['success']),
        'on_warning': generate_contrasting_text(status['warning']),
        'on_error': generate_contrasting_text(status['error']),
    }


TEXT_SYSTEMS: Dict[Persona, Dict[str, str]] = {
    Persona.CHILD: _text_system(
        BACKGROUND_SYSTEMS[Persona.CHILD]['primary'], CHILD_CORE_COLORS, STATUS_COLORS[Persona.CHILD]
    ),
    Persona.PARENT: _text_system(
        BACKGROUND_SYSTEMS[Persona.PARENT]['primary'], PARENT_CORE_COLORS, STATUS_COLORS[Persona.PARENT]
    ),
}

BORDER_SYSTEMS: Dict[Persona, Dict[str, str]] = {
    Persona.CHILD: {
        'light': adjust_brightness(CHILD_CORE_COLORS['primary'], 40),
        'medium': adjust_brightness(CHILD_CORE_COLORS['primary'], 20),
        'strong': CHILD_CORE_COLORS['primary'],
        'success': adjust_brightness(CHILD_CORE_COLORS['green'], 20),
        'warning': adjust_brightness(CHILD_CORE_COLORS['yellow'], 20),
        'error': adjust_brightness(CHILD_CORE_COLORS['red'], 20),
    },
    Persona.PARENT: {
        'light': PARENT_GRAY[200],
        'medium': PARENT_GRAY[300],
        'strong': PARENT_GRAY[400],
        'success': adjust_brightness(PARENT_CORE_COLORS['success'], 20),
        'warning': adjust_brightness(PARENT_CORE_COLORS['warning'], 20),
        'error': adjust_brightness(PARENT_CORE_COLORS['error'], 20),
    },
}


def tinted_shadow(color: str, offset_y: float = 4, blur_radius: float = 12,
                  elevation: int = 4) -> Shadow:
    """Colored shadow used by the playful child surfaces."""
    return Shadow(offset_y=offset_y, blur_radius=blur_radius, color=color,
                  opacity=TINT_OPACITY, elevation=elevation)


def glow(color: str, blur_radius: float = 20, opacity: float = TINT_OPACITY) -> Shadow:
    """Centered glow around an element."""
    return Shadow(offset_y=0, blur_radius=blur_radius, color=color, opacity=opacity)


SHADOW_SYSTEMS: Dict[Persona, Dict[str, Shadow]] = {
    Persona.CHILD: {
        'primary': tinted_shadow(adjust_brightness(CHILD_CORE_COLORS['primary'], -10)),
        'secondary': tinted_shadow(adjust_brightness(CHILD_CORE_COLORS['secondary'], -10)),
        'accent': tinted_shadow(adjust_brightness(CHILD_CORE_COLORS['accent'], -10)),
        **{name: tinted_shadow(CHILD_CORE_COLORS[name]) for name in EXTENDED_COLOR_NAMES},
        'sm': Shadow(offset_y=1, blur_radius=3, opacity=0.12, elevation=2),
        'md': Shadow(offset_y=3, blur_radius=6, opacity=0.16, elevation=4),
        'lg': Shadow(offset_y=10, blur_radius=20, opacity=0.19, elevation=8),
        'xl': Shadow(offset_y=14, blur_radius=28, opacity=0.25, elevation=12),
    },
    Persona.PARENT: {
        'sm': Shadow(offset_y=1, blur_radius=3, opacity=0.08, elevation=1),
        'md': Shadow(offset_y=3, blur_radius=6, opacity=0.10, elevation=3),
        'lg': Shadow(offset_y=10, blur_radius=20, opacity=0.12, elevation=6),
        'xl': Shadow(offset_y=14, blur_radius=28, opacity=0.15, elevation=9),
    },
}


def validate_color_systems() -> Dict[str, bool]:
    """Check the core text/background pairs of both modes against WCAG AAA.

    Returns:
        Mapping of check name to pass/fail
    """
    checks = {
        'child_text_on_background': meets_aaa(
            TEXT_SYSTEMS[Persona.CHILD]['primary'], BACKGROUND_SYSTEMS[Persona.CHILD]['primary']
        ),
        'parent_text_on_background': meets_aaa(
            TEXT_SYSTEMS[Persona.PARENT]['primary'], BACKGROUND_SYSTEMS[Persona.PARENT]['primary']
        ),
        'child_text_on_primary': meets_aaa(
            TEXT_SYSTEMS[Persona.CHILD]['on_primary'], CHILD_CORE_COLORS['primary']
        ),
        'parent_text_on_primary': meets_aaa(
            TEXT_SYSTEMS[Persona.PARENT]['on_primary'], PARENT_CORE_COLORS['primary']
        ),
    }

    if not all(checks.values()):
        failing = [name for name, ok in checks.items() if not ok]
        logger.warning(f"Color combinations below WCAG AAA: {', '.join(failing)}")

    return checks
