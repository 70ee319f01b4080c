"""Turns an incoming Flask request into a PromptRequest.

Multipart bodies are read field by field (uploads are kept only as handles);
any other content type is parsed as a JSON object with the same field names.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from flask import Request

from app.domain.models import DEFAULT_PLATFORM, DEFAULT_QUANTITY, PromptRequest

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class InvalidRequestBody(ValueError):
    pass


def parse_quantity(value: Any) -> int:
    """Integer-prefix parse: "3" -> 3, "3 posts" -> 3, "abc"/None/"0" -> 1."""
    if isinstance(value, bool):
        return DEFAULT_QUANTITY
    if isinstance(value, int):
        return value or DEFAULT_QUANTITY
    if isinstance(value, float):
        return int(value) or DEFAULT_QUANTITY
    m = _INT_PREFIX.match(str(value)) if value is not None else None
    if not m:
        return DEFAULT_QUANTITY
    return int(m.group(1)) or DEFAULT_QUANTITY


class PromptRequestParser(ABC):
    @abstractmethod
    def parse(self, req: Request) -> PromptRequest:
        ...


class MultipartPromptRequestParser(PromptRequestParser):
    def _upload(self, req: Request, name: str) -> Any:
        f = req.files.get(name)
        # FileStorage sem filename = campo de arquivo vazio
        if f:
            return f
        return req.form.get(name) or None

    def parse(self, req: Request) -> PromptRequest:
        form = req.form
        return PromptRequest(
            profession=form.get("profession"),
            color_palette=form.get("colorPalette"),
            visual_style=form.get("visualStyle"),
            subject=form.get("subject"),
            theme=form.get("theme"),
            quantity=parse_quantity(form.get("quantity")),
            logo=self._upload(req, "logo"),
            custom_text=form.get("customText") or None,
            reference_image=self._upload(req, "referenceImage"),
            art_style=form.get("artStyle") or None,
            platform=form.get("platform") or DEFAULT_PLATFORM,
        )


class JsonPromptRequestParser(PromptRequestParser):
    def parse(self, req: Request) -> PromptRequest:
        j = req.get_json(force=True, silent=True)
        if not isinstance(j, dict):
            raise InvalidRequestBody("Corpo da requisição inválido")
        return PromptRequest(
            profession=j.get("profession"),
            color_palette=j.get("colorPalette"),
            visual_style=j.get("visualStyle"),
            subject=j.get("subject"),
            theme=j.get("theme"),
            quantity=parse_quantity(j.get("quantity")),
            logo=j.get("logo") or None,
            custom_text=j.get("customText") or None,
            reference_image=j.get("referenceImage") or None,
            art_style=j.get("artStyle") or None,
            platform=j.get("platform") or DEFAULT_PLATFORM,
        )


def parser_for(content_type: str | None) -> PromptRequestParser:
    if "multipart/form-data" in (content_type or ""):
        return MultipartPromptRequestParser()
    return JsonPromptRequestParser()


def parse_prompt_request(req: Request) -> PromptRequest:
    return parser_for(req.headers.get("Content-Type")).parse(req)
