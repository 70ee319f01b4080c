"""Builds the instructions sent to the completion model and the local fallback prompt."""

from __future__ import annotations

from app.application.services.content_catalog import resolve_platform_format, resolve_tone
from app.domain.models import PromptRequest


PROMPT_PREFIX = "Prompt Gerado: "

SYSTEM_PROMPT = (
    "Você é um especialista em criação de conteúdo para redes sociais com foco em engajamento e conversão. "
    "Sua tarefa é gerar prompts otimizados para criar conteúdo de alta qualidade para diferentes plataformas.\n"
    "\n"
    "Formato esperado:\n"
    "\"Crie um [tipo de conteúdo] para [Profissão], no estilo [Estilo], utilizando a paleta de cores [Paleta de Cores]. "
    "O assunto principal é [Assunto] e o tema é [Tema]. Gere [Quantidade de posts] posts com foco em engajamento, "
    "design criativo e conteúdo relevante para o público-alvo. O tom deve ser [Tom baseado no estilo].\"\n"
    "\n"
    "Instruções específicas:\n"
    "1. Adicione detalhes específicos e relevantes para a profissão informada\n"
    "2. Sugira elementos visuais específicos que funcionam bem com o estilo escolhido\n"
    "3. Inclua dicas de engajamento específicas para o tema\n"
    "4. Adicione sugestões de hashtags relevantes\n"
    "5. Inclua orientações sobre layout e composição visual\n"
    "6. Sugira estratégias de call-to-action\n"
    "7. Adicione dicas de timing e frequência de postagem\n"
    "8. Inclua sugestões de interação com a audiência\n"
    "9. Ajuste o prompt para a plataforma específica selecionada\n"
    "10. Inclua referências ao estilo da arte solicitado\n"
    "11. Se houver logotipo, sugira como integrá-lo visualmente\n"
    "12. Se houver imagem de referência, sugira elementos inspirados nela\n"
    "13. Se houver texto personalizado, sugira como incorporá-lo visualmente\n"
    "14. Adicione especificações técnicas para a plataforma"
)

_USER_TEMPLATE = (
    "\n"
    "Profissão: {profession}\n"
    "Paleta de Cores: {color_palette}\n"
    "Estilo Visual: {visual_style}\n"
    "Estilo da Arte: {art_style}\n"
    "Assunto Principal: {subject}\n"
    "Tema: {theme}\n"
    "Quantidade de Posts: {quantity}\n"
    "Plataforma: {platform}\n"
    "Formato da Plataforma: {platform_format}\n"
    "\n"
    "{logo_info}\n"
    "{reference_info}\n"
    "{custom_text_info}\n"
    "\n"
    "Por favor, gere um prompt otimizado seguindo o formato e instruções acima, "
    "considerando todos os elementos específicos fornecidos.\n"
)


def logo_instruction(req: PromptRequest) -> str:
    if req.has_logo:
        return "Incluir logotipo da marca de forma sutil e profissional"
    return "Sem logotipo específico"


def reference_instruction(req: PromptRequest) -> str:
    if req.has_reference_image:
        return "Inspirar-se na imagem de referência mantendo a essência do estilo"
    return "Sem referência visual específica"


def custom_text_instruction(req: PromptRequest) -> str:
    if req.has_custom_text:
        return f'Incorporar o texto: "{req.custom_text}" de forma visualmente atraente'
    return "Sem texto personalizado específico"


def build_user_prompt(req: PromptRequest) -> str:
    return _USER_TEMPLATE.format(
        profession=req.profession,
        color_palette=req.color_palette,
        visual_style=req.visual_style,
        art_style=req.art_style or "Não especificado",
        subject=req.subject,
        theme=req.theme,
        quantity=req.quantity,
        platform=req.platform,
        platform_format=resolve_platform_format(req.platform),
        logo_info=logo_instruction(req),
        reference_info=reference_instruction(req),
        custom_text_info=custom_text_instruction(req),
    )


def build_fallback_prompt(req: PromptRequest) -> str:
    """Deterministic prompt assembled only from the request and the lookup tables."""
    parts = [
        f"{PROMPT_PREFIX}Crie um conteúdo para {req.profession}, no estilo {req.visual_style}, "
        f"utilizando a paleta de cores {req.color_palette}. "
        f"O assunto principal é {req.subject} e o tema é {req.theme}. "
        f"Gere {req.quantity} posts com foco em engajamento, design criativo e conteúdo relevante "
        f"para o público-alvo. O tom deve ser {resolve_tone(req.visual_style)}. "
        f"Formato: {resolve_platform_format(req.platform)}."
    ]
    if req.art_style:
        parts.append(f"Estilo da arte: {req.art_style}.")
    if req.has_logo:
        parts.append("Incluir logotipo da marca.")
    if req.has_reference_image:
        parts.append("Inspirar-se em referências visuais.")
    if req.has_custom_text:
        parts.append(f"Texto personalizado: {req.custom_text}.")
    return " ".join(parts)
