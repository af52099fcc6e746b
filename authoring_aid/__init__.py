"""
Authoring Aid: contrast and readability feedback while you write

Computes a WCAG contrast rating for a foreground/background color pair and
readability statistics plus heuristic style suggestions for typed text.
"""

__version__ = "0.1.0"
__author__ = "Authoring Aid Team"
