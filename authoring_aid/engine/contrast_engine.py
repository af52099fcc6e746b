"""WCAG contrast engine: luminance, contrast ratio and compliance tiers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from loguru import logger

from .color import Color, ColorLike, parse_color


# WCAG 2.x thresholds
AA_LARGE_THRESHOLD = 3.0
AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0


class ContrastTier(Enum):
    """WCAG compliance tier of a contrast ratio."""
    FAIL = "fail"
    AA_LARGE = "aa_large"
    AA = "aa"
    AAA = "aaa"


class FixDirection(Enum):
    """Which way to move the foreground when repairing contrast."""
    DARKER = "darker"
    LIGHTER = "lighter"


TIER_STATUS = {
    ContrastTier.FAIL: "Contrast fails WCAG standards.",
    ContrastTier.AA_LARGE: "AA Large Text (≥18pt) only. Improve contrast.",
    ContrastTier.AA: "AA compliance. Sufficient for normal text.",
    ContrastTier.AAA: "AAA compliance. Ideal contrast.",
}


@dataclass(frozen=True)
class ContrastResult:
    """Contrast rating for a foreground/background pair."""
    foreground: str
    background: str
    ratio: float
    tier: ContrastTier

    @property
    def status(self) -> str:
        return tier_status(self.tier)

    @property
    def needs_fix(self) -> bool:
        return tier_needs_fix(self.tier)


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """Relative luminance of a color in [0, 1] per the WCAG definition."""
    red, green, blue = (_linearize(c) for c in parse_color(color).channels())
    return 0.2126 * red + 0.7152 * green + 0.0722 * blue


def _raw_ratio(foreground: Color, background: Color) -> float:
    fg_luminance = relative_luminance(foreground)
    bg_luminance = relative_luminance(background)
    brighter = max(fg_luminance, bg_luminance)
    darker = min(fg_luminance, bg_luminance)
    return (brighter + 0.05) / (darker + 0.05)


def contrast_ratio(foreground: ColorLike, background: ColorLike) -> float:
    """Contrast ratio of two colors rounded to 2 decimals, in [1.00, 21.00].

    The ratio is symmetric: swapping foreground and background gives the
    same value.
    """
    return round(_raw_ratio(parse_color(foreground), parse_color(background)), 2)


def classify_contrast(ratio: float) -> ContrastTier:
    """Map a (rounded) contrast ratio onto its WCAG tier."""
    if ratio < AA_LARGE_THRESHOLD:
        return ContrastTier.FAIL
    if ratio < AA_THRESHOLD:
        return ContrastTier.AA_LARGE
    if ratio < AAA_THRESHOLD:
        return ContrastTier.AA
    return ContrastTier.AAA


def tier_status(tier: ContrastTier) -> str:
    return TIER_STATUS[tier]


def tier_needs_fix(tier: ContrastTier) -> bool:
    """Only failing pairs surface the fix-contrast affordances."""
    return tier is ContrastTier.FAIL


def analyze_contrast(foreground: ColorLike, background: ColorLike) -> ContrastResult:
    """Rate a foreground/background pair."""
    fg = parse_color(foreground)
    bg = parse_color(background)
    ratio = contrast_ratio(fg, bg)
    tier = classify_contrast(ratio)

    logger.debug(f"Contrast {fg} on {bg}: {ratio:.2f} ({tier.name})")

    return ContrastResult(
        foreground=fg.to_hex(),
        background=bg.to_hex(),
        ratio=ratio,
        tier=tier,
    )


def _mix(color: Color, target: int, amount: float) -> Color:
    return Color(*(round(c + (target - c) * amount) for c in color.channels()))


def suggest_contrast_fix(foreground: ColorLike, background: ColorLike,
                         direction: FixDirection,
                         target_ratio: float = AA_THRESHOLD) -> Optional[Color]:
    """Nudge the foreground darker or lighter until it reaches ``target_ratio``.

    The foreground is mixed toward black (DARKER) or white (LIGHTER) in 1%
    steps. Returns the first mix that meets the target, the foreground itself
    if it already does, or None if even pure black/white falls short.
    """
    fg = parse_color(foreground)
    bg = parse_color(background)

    if contrast_ratio(fg, bg) >= target_ratio:
        return fg

    target_channel = 0 if direction is FixDirection.DARKER else 255
    for step in range(1, 101):
        candidate = _mix(fg, target_channel, step / 100)
        if contrast_ratio(candidate, bg) >= target_ratio:
            logger.debug(
                f"Contrast fix ({direction.value}) for {fg} on {bg}: {candidate} after {step}%"
            )
            return candidate

    logger.debug(f"No {direction.value} fix reaches {target_ratio} for {fg} on {bg}")
    return None
