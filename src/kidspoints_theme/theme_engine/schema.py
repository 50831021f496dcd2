"""Theme schema definitions for the Kids Points theming system.

This module defines the Pydantic models that structure all theme data,
including universe configurations, generated palettes, theme bundles
(colors, typography, spacing, animations, effects, metadata) and the
validation reports produced for them.
"""

from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum
import re


HEX_COLOR_PATTERN = re.compile(r'#[0-9A-Fa-f]{6}')


class Persona(str, Enum):
    """Who the theme is built for"""
    CHILD = "child"
    PARENT = "parent"


class AgeGroup(str, Enum):
    """Child age groups"""
    YOUNG = "young"    # 4-6
    CHILD = "child"    # 7-10
    TEEN = "teen"      # 11-16


class UniverseKey(str, Enum):
    """Named universe themes available to children"""
    AQUA = "aqua"
    FANTASY = "fantasy"
    SPACE = "space"
    JUNGLE = "jungle"
    CANDY = "candy"
    VOLCANO = "volcano"
    ICE = "ice"
    RAINBOW = "rainbow"


class HarmonyRule(str, Enum):
    """Color harmony rules based on hue rotation"""
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"


class WCAGLevel(str, Enum):
    """WCAG conformance levels"""
    AA = "AA"
    AAA = "AAA"


class ThemeCategory(str, Enum):
    """Predefined theme catalog categories"""
    CHILD_AGE = "child-age"
    CHILD_UNIVERSE = "child-universe"
    PARENT = "parent"


class TextPath(str, Enum):
    """Which branch of the contrasting text selection produced a color"""
    LIGHT = "light"
    DARK = "dark"
    FALLBACK = "fallback"


def _freeze(value: Any) -> Any:
    """Read-only copy of nested mappings and lists"""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


class FrozenModel(BaseModel):
    """Base for immutable value objects.

    Mapping fields are stored as read-only views, so cached instances can
    be shared between callers.
    """
    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator('*', mode='after')
    @classmethod
    def freeze_mappings(cls, v):
        if isinstance(v, Mapping):
            return _freeze(v)
        return v


class ColorValue(FrozenModel):
    """A color with its RGB, HSL and hex views"""
    hex: str
    rgb: Tuple[int, int, int]
    hsl: Tuple[int, int, int]

    @field_validator('hex')
    @classmethod
    def validate_hex(cls, v):
        """Hex must be a full #RRGGBB string"""
        if not HEX_COLOR_PATTERN.fullmatch(v):
            raise ValueError(f"Invalid hex color: {v}")
        return v.upper()


class ContrastingText(FrozenModel):
    """Result of picking a text color for a background"""
    color: str
    ratio: float
    path: TextPath


class UniverseConfig(FrozenModel):
    """Base color configuration of a universe"""
    key: UniverseKey
    primary: str = Field(..., description="Base color of the universe")
    harmony: HarmonyRule
    saturation: int = Field(..., ge=0, le=100, description="Target saturation")
    brightness: int = Field(..., ge=0, le=100, description="Target lightness")


class PaletteBackgrounds(FrozenModel):
    primary: str
    secondary: str
    surface: str
    elevated: str


class PaletteText(FrozenModel):
    primary: str
    secondary: str
    on_primary: str
    on_secondary: str


class Palette(FrozenModel):
    """Complete palette derived from a universe configuration"""

    primary: str
    secondary: str
    accent: str

    success: str = "#4CAF50"
    warning: str = "#FF9800"
    error: str = "#F44336"
    info: str = "#2196F3"

    # 10-step ramp of the primary color keyed 50..900
    variations: Mapping[int, str]

    backgrounds: PaletteBackgrounds
    text: PaletteText


class PaletteValidation(FrozenModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class ThemeColors(FrozenModel):
    """Resolved color tokens of a theme"""

    primary: str
    secondary: str
    accent: str

    # Status
    success: str
    warning: str
    error: str
    info: str

    # Gamification
    points: str
    experience: str
    level: str
    achievement: str
    streak: str
    badge: str

    # Backgrounds
    background: str
    background_secondary: str
    background_tertiary: str
    surface: str

    # Text
    text: str
    text_secondary: str
    text_tertiary: str
    text_inverse: str

    # Text on colors
    on_primary: str
    on_secondary: str
    on_accent: str
    on_success: str
    on_warning: str
    on_error: str

    # Borders
    border: str
    border_medium: Optional[str] = None
    border_strong: str

    # Interactive states
    hover: str
    active: str
    disabled: str
    focus: str

    # Extended named colors (child default palette)
    extended: Mapping[str, str] = Field(default_factory=dict)
    # Neutral ramp (parent)
    gray: Mapping[int, str] = Field(default_factory=dict)
    # Domain semantics: approval states, priorities, mission categories
    semantics: Mapping[str, str] = Field(default_factory=dict)
    # Dark surface set
    dark: Mapping[str, str] = Field(default_factory=dict)


class FontFamilies(FrozenModel):
    """The five font-family roles plus specialty families"""
    regular: str
    medium: str
    semi_bold: str
    bold: str
    extra_bold: str
    specialty: Mapping[str, str] = Field(default_factory=dict)


class LineHeights(FrozenModel):
    tight: float
    normal: float
    relaxed: float


class TextPreset(FrozenModel):
    font_size: int
    font_weight: str
    line_height: float
    letter_spacing: Optional[str] = None
    color: Optional[str] = None


TYPE_SCALE_KEYS = (
    'xs', 'sm', 'md', 'lg', 'xl', '2xl', '3xl', '4xl', '5xl', '6xl', '7xl', '8xl', '9xl'
)


class Typography(FrozenModel):
    """Typography scale of a theme"""
    font_families: FontFamilies
    sizes: Mapping[str, int]
    line_heights: LineHeights
    weights: Mapping[str, str]
    presets: Mapping[str, TextPreset] = Field(default_factory=dict)

    @field_validator('sizes')
    @classmethod
    def validate_sizes(cls, v):
        """All thirteen named sizes are required"""
        missing = [key for key in TYPE_SCALE_KEYS if key not in v]
        if missing:
            raise ValueError(f"Missing typography sizes: {', '.join(missing)}")
        return v


class TouchTargets(FrozenModel):
    min: float
    comfortable: float
    generous: float


class Spacing(FrozenModel):
    """Spacing scale, touch targets and corner radii"""
    scale: Mapping[str, float]
    touch_target: TouchTargets
    border_radius: Mapping[str, int]
    layout: Mapping[str, float] = Field(default_factory=dict)


class Animations(FrozenModel):
    durations: Mapping[str, int]
    easings: Mapping[str, str]
    celebration: bool
    reduced_motion: bool
    cues: Mapping[str, str] = Field(default_factory=dict)


class Shadow(FrozenModel):
    """Platform neutral shadow / elevation value"""
    offset_x: float = 0
    offset_y: float
    blur_radius: float
    color: str = "#000000"
    opacity: float = Field(..., ge=0, le=1)
    elevation: int = 0
    spread: float = 0


class Gradient(FrozenModel):
    angle: int
    stops: Tuple[str, ...]


class Overlay(FrozenModel):
    color: str
    opacity: float = Field(..., ge=0, le=1)


class Effects(FrozenModel):
    """Visual effects of a theme"""
    shadows: Mapping[str, Shadow]
    active_shadow: Optional[str] = None
    glow: Mapping[str, Shadow] = Field(default_factory=dict)
    gradients: Mapping[str, Gradient] = Field(default_factory=dict)
    patterns: Optional[Tuple[str, ...]] = None
    overlays: Mapping[str, Overlay] = Field(default_factory=dict)
    hover: Mapping[str, str] = Field(default_factory=dict)


class AccessibilityInfo(FrozenModel):
    wcag_level: WCAGLevel = WCAGLevel.AAA
    contrast_ratio: float
    touch_target_size: int
    reduced_motion: bool
    screen_reader: bool = False
    keyboard_navigation: bool = False
    high_contrast: bool = False


class ThemeMetadata(FrozenModel):
    name: str
    display_name: str
    description: str = ""
    audience: str = ""
    features: Tuple[str, ...] = ()
    accessibility: AccessibilityInfo
    productivity: Mapping[str, Any] = Field(default_factory=dict)


class ThemeBundle(FrozenModel):
    """Complete generated theme consumed by the UI layer"""

    mode: Persona
    age_group: Optional[AgeGroup] = None
    universe: Optional[UniverseKey] = None

    colors: ThemeColors
    # Universe palette the colors were layered from, if any
    palette: Optional[Palette] = None
    typography: Typography
    spacing: Spacing
    animations: Animations
    effects: Effects
    metadata: ThemeMetadata


class FactoryValidation(FrozenModel):
    """Result of the factory-level accessibility check"""
    is_valid: bool
    score: int
    issues: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class AccessibilityReport(FrozenModel):
    wcag_level: WCAGLevel
    overall_score: int
    contrast_ratio: float
    touch_target_compliance: bool
    issues: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class ColorHarmonyReport(FrozenModel):
    score: int
    primary_hue: int
    saturation_balance: int
    brightness_range: int
    notes: List[str] = Field(default_factory=list)


class UsabilityScores(FrozenModel):
    child_friendly: int
    parent_professional: int
    cross_platform: int
    performance: int


class ValidationReport(FrozenModel):
    """Full diagnostic report for one theme"""

    theme_name: str
    category: Persona
    accessibility: AccessibilityReport
    color_harmony: ColorHarmonyReport
    usability: UsabilityScores

    @property
    def score(self) -> int:
        return self.accessibility.overall_score

    @property
    def wcag_level(self) -> WCAGLevel:
        return self.accessibility.wcag_level

    @property
    def issues(self) -> List[str]:
        return self.accessibility.issues

    @property
    def recommendations(self) -> List[str]:
        return self.accessibility.recommendations


class ReportSummary(FrozenModel):
    total_themes: int
    wcag_aaa_compliant: int
    average_score: float
    best_theme: str
    worst_theme: str


class CompleteReport(FrozenModel):
    summary: ReportSummary
    themes: List[ValidationReport]
    recommendations: List[str]


class ThemeEntry(FrozenModel):
    """A predefined theme in the catalog"""
    key: str
    category: ThemeCategory
    theme: ThemeBundle


class ThemeHealth(FrozenModel):
    key: str
    category: ThemeCategory
    validation: FactoryValidation


class SystemHealth(FrozenModel):
    results: List[ThemeHealth]
    all_valid: bool
    average_score: float
