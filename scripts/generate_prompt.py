#!/usr/bin/env python3
"""Generates a social content prompt from the command line.

Runs the same use-case as POST /api/generate-prompt and prints the JSON payload.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

# Allow running as "python3 scripts/generate_prompt.py"
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.generate_prompt import execute as generate_prompt_uc
from app.core.settings import Settings
from app.domain.models import DEFAULT_PLATFORM, PromptRequest
from app.infrastructure.chat_completion_client import ChatCompletionClient
from app.infrastructure.completion_mock_client import CompletionMockClient
from app.presentation.http.prompt_request_parser import parse_quantity


def _build_client(args: argparse.Namespace, settings: Settings):
    if args.offline:
        return None
    if args.mock or settings.completion_mock:
        return CompletionMockClient(settings)
    if settings.zai_api_key:
        return ChatCompletionClient(settings)
    return None


def main() -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Generate a social media content prompt")
    parser.add_argument("--profession", required=True)
    parser.add_argument("--color-palette", required=True)
    parser.add_argument("--visual-style", required=True)
    parser.add_argument("--subject", required=True)
    parser.add_argument("--theme", required=True)
    parser.add_argument("--platform", default=DEFAULT_PLATFORM)
    parser.add_argument("--quantity", default="1")
    parser.add_argument("--art-style", default=None)
    parser.add_argument("--custom-text", default=None)
    parser.add_argument("--logo", action="store_true", help="Mark a logo as provided")
    parser.add_argument("--reference-image", action="store_true", help="Mark a reference image as provided")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--mock", action="store_true", help="Use the offline mock completion client")
    mode.add_argument("--offline", action="store_true", help="Skip the completion API (fallback prompt)")
    args = parser.parse_args()

    settings = Settings.load()
    req = PromptRequest(
        profession=args.profession,
        color_palette=args.color_palette,
        visual_style=args.visual_style,
        subject=args.subject,
        theme=args.theme,
        art_style=args.art_style,
        platform=args.platform or DEFAULT_PLATFORM,
        quantity=parse_quantity(args.quantity),
        logo=args.logo or None,
        reference_image=args.reference_image or None,
        custom_text=args.custom_text,
    )
    out, status = generate_prompt_uc(_build_client(args, settings), req)
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0 if status == 200 else 1


if __name__ == "__main__":
    raise SystemExit(main())
