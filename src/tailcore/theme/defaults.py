"""Built-in design tokens.

``DEFAULT_THEME`` is the base tree every configuration is resolved
against.  It covers each scale the downstream generator queries; user
configuration extends or replaces these scales, it never edits them.
"""
from __future__ import annotations

from typing import Final

from tailcore.theme.tokens import TokenTable

_SPACING: Final[dict[str, str]] = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

# Flattened palette: "<hue>-<shade>" plus the keyword colors.
_PALETTE: Final[dict[str, tuple[str, ...]]] = {
    "gray": (
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af",
        "#6b7280", "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ),
    "red": (
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171",
        "#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "green": (
        "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80",
        "#22c55e", "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
    ),
    "blue": (
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa",
        "#3b82f6", "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
}
_SHADES: Final[tuple[str, ...]] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
)

_COLORS: Final[dict[str, str]] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000",
    "white": "#fff",
    **{
        f"{hue}-{shade}": value
        for hue, values in _PALETTE.items()
        for shade, value in zip(_SHADES, values)
    },
}

DEFAULT_THEME: Final[TokenTable] = TokenTable(
    {
        "screens": {
            "sm": "640px",
            "md": "768px",
            "lg": "1024px",
            "xl": "1280px",
            "2xl": "1536px",
        },
        "spacing": _SPACING,
        "colors": _COLORS,
        "fontSize": {
            "xs": "0.75rem",
            "sm": "0.875rem",
            "base": "1rem",
            "lg": "1.125rem",
            "xl": "1.25rem",
            "2xl": "1.5rem",
            "3xl": "1.875rem",
            "4xl": "2.25rem",
            "5xl": "3rem",
            "6xl": "3.75rem",
        },
        "fontWeight": {
            "thin": "100",
            "light": "300",
            "normal": "400",
            "medium": "500",
            "semibold": "600",
            "bold": "700",
            "black": "900",
        },
        "lineHeight": {
            "none": "1",
            "tight": "1.25",
            "snug": "1.375",
            "normal": "1.5",
            "relaxed": "1.625",
            "loose": "2",
        },
        "letterSpacing": {
            "tighter": "-0.05em",
            "tight": "-0.025em",
            "normal": "0em",
            "wide": "0.025em",
            "wider": "0.05em",
            "widest": "0.1em",
        },
        "borderRadius": {
            "none": "0px",
            "sm": "0.125rem",
            "DEFAULT": "0.25rem",
            "md": "0.375rem",
            "lg": "0.5rem",
            "xl": "0.75rem",
            "2xl": "1rem",
            "full": "9999px",
        },
        "borderWidth": {
            "DEFAULT": "1px",
            "0": "0px",
            "2": "2px",
            "4": "4px",
            "8": "8px",
        },
        "opacity": {
            "0": "0",
            "5": "0.05",
            "10": "0.1",
            "25": "0.25",
            "50": "0.5",
            "75": "0.75",
            "90": "0.9",
            "100": "1",
        },
        "zIndex": {
            "auto": "auto",
            "0": "0",
            "10": "10",
            "20": "20",
            "30": "30",
            "40": "40",
            "50": "50",
        },
        "maxWidth": {
            "none": "none",
            "xs": "20rem",
            "sm": "24rem",
            "md": "28rem",
            "lg": "32rem",
            "xl": "36rem",
            "2xl": "42rem",
            "full": "100%",
            "prose": "65ch",
        },
    }
)
