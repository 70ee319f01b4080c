from dataclasses import dataclass
from typing import Any, List, Optional, Union

DEFAULT_PLATFORM = "instagram"
DEFAULT_QUANTITY = 1

# (atributo, nome no payload)
REQUIRED_FIELDS = (
    ("profession", "profession"),
    ("color_palette", "colorPalette"),
    ("visual_style", "visualStyle"),
    ("subject", "subject"),
    ("theme", "theme"),
)


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


@dataclass
class PromptRequest:
    profession: Optional[str] = None
    color_palette: Optional[str] = None
    visual_style: Optional[str] = None
    subject: Optional[str] = None
    theme: Optional[str] = None
    art_style: Optional[str] = None
    platform: str = DEFAULT_PLATFORM
    quantity: int = DEFAULT_QUANTITY
    logo: Any = None             # only checked for presence
    reference_image: Any = None  # only checked for presence
    custom_text: Optional[str] = None

    @property
    def has_logo(self) -> bool:
        return bool(self.logo)

    @property
    def has_reference_image(self) -> bool:
        return bool(self.reference_image)

    @property
    def has_custom_text(self) -> bool:
        return bool(self.custom_text)

    def missing_required_fields(self) -> List[str]:
        return [wire for attr, wire in REQUIRED_FIELDS if _is_blank(getattr(self, attr))]


@dataclass(frozen=True)
class CompletionSuccess:
    text: str
    model: Optional[str] = None


@dataclass(frozen=True)
class CompletionFailure:
    reason: str


CompletionResult = Union[CompletionSuccess, CompletionFailure]
