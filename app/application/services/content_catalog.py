"""Static lookup tables for platform formats and style tones.

Both lookups are total: unknown keys resolve to a generic default.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any


DEFAULT_PLATFORM_FORMAT = "Formato padrão"
DEFAULT_TONE = "Profissional"

PLATFORM_FORMATS = MappingProxyType(
    {
        "instagram": "Formato quadrado (1:1) para feed, formato vertical (9:16) para stories",
        "facebook": "Formato quadrado (1:1) para feed, formato vertical (9:16) para stories",
        "tiktok": "Formato vertical (9:16) otimizado para vídeos curtos",
        "whatsapp": "Formato circular para status, formato vertical (9:16)",
    }
)

STYLE_TONES = MappingProxyType(
    {
        "Minimalista": "Profissional",
        "Futurista": "Inovador",
        "Vintage": "Nostálgico",
        "Luxuoso": "Elegante",
        "Moderno": "Contemporâneo",
        "Clássico": "Profissional",
        "Industrial": "Sério",
        "Boêmio": "Divertido",
        "Retrô": "Nostálgico",
        "Contemporâneo": "Profissional",
        "Artístico": "Criativo",
        "Profissional": "Profissional",
        "Divertido": "Divertido",
        "Sério": "Profissional",
        "Criativo": "Criativo",
        "Elegante": "Elegante",
        "Casual": "Divertido",
        "Formal": "Profissional",
        "Informal": "Divertido",
        "Sophisticated": "Profissional",
        "Playful": "Divertido",
        "Bold": "Inovador",
        "Subtle": "Profissional",
        "Vibrant": "Criativo",
        "Monochromatic": "Profissional",
        "Gradient": "Criativo",
        "Flat": "Profissional",
        "3D": "Inovador",
        "Neon": "Criativo",
        "Dark Mode": "Profissional",
        "Light Mode": "Profissional",
    }
)


def resolve_platform_format(platform: Any) -> str:
    if not isinstance(platform, str):
        return DEFAULT_PLATFORM_FORMAT
    return PLATFORM_FORMATS.get(platform, DEFAULT_PLATFORM_FORMAT)


def resolve_tone(visual_style: Any) -> str:
    if not isinstance(visual_style, str):
        return DEFAULT_TONE
    return STYLE_TONES.get(visual_style, DEFAULT_TONE)
