"""Contrast engine and the assistant that orchestrates both engines."""

from .color import Color, InvalidColorFormat, parse_color
from .contrast_engine import (
    ContrastResult,
    ContrastTier,
    FixDirection,
    analyze_contrast,
    classify_contrast,
    contrast_ratio,
    relative_luminance,
    suggest_contrast_fix,
)
from .assistant import AuthoringAssistant, TextAnalysisResult

__all__ = [
    'Color',
    'InvalidColorFormat',
    'parse_color',
    'ContrastResult',
    'ContrastTier',
    'FixDirection',
    'analyze_contrast',
    'classify_contrast',
    'contrast_ratio',
    'relative_luminance',
    'suggest_contrast_fix',
    'AuthoringAssistant',
    'TextAnalysisResult',
]
