# ===== Arquivo: utils/response_normalizer.py =====
from __future__ import annotations
from typing import Any, Dict
import json
import logging

from models.analysis_request import OutputShape, VideoInfo

logger = logging.getLogger(__name__)

NOT_ANALYZED = "Não foi possível analisar"
NOT_PROCESSED = "Erro ao processar"


# =============================
# Esqueletos de fallback (constantes)
# =============================

def simplified_fallback(didactics: str = NOT_ANALYZED, other: str = NOT_ANALYZED) -> Dict[str, Any]:
    return {
        "Didática na explicação": didactics,
        "Linguagem utilizada": other,
        "Adequação ao nível": {
            "número de acordes": 0,
            "tipos de acordes (naturais/suspensos)": other,
        },
    }


def full_analysis_fallback() -> Dict[str, Any]:
    return {
        "avaliacao": {
            "interacao_engajamento": {
                "estimula_pratica_ativa": NOT_ANALYZED,
                "explicacao_clara_objetiva": NOT_ANALYZED,
                "reconhece_dificuldades": NOT_ANALYZED,
            },
            "metodologia_ensino": {
                "divide_etapas_logicas": NOT_ANALYZED,
                "utiliza_recursos_visuais": NOT_ANALYZED,
                "proporciona_tempo_assimilacao": NOT_ANALYZED,
                "clareza_postura_gestos": NOT_ANALYZED,
            },
            "apropriacao_conteudo": {
                "dominio_tecnico": NOT_ANALYZED,
                "contextualiza_musica": NOT_ANALYZED,
            },
            "organizacao": {
                "duracao_adequada": NOT_ANALYZED,
                "recursos_complementares": NOT_ANALYZED,
            },
            "nivel_proficiencia": NOT_ANALYZED,
            "observacoes": NOT_ANALYZED,
            "numero_acordes": 0,
            "tipos_acordes": NOT_ANALYZED,
        }
    }


def dumps_indented(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


# Resposta fixa do cliente Gemini quando a API falha
GEMINI_UNAVAILABLE_JSON = dumps_indented(simplified_fallback())


def gemini_error_json(message: str) -> str:
    # Aspas trocadas por apóstrofos; json.dumps cuida do resto do escape
    safe = (message or "").replace('"', "'")
    return dumps_indented(simplified_fallback(didactics=f"Erro: {safe}", other=NOT_PROCESSED))


# =============================
# Limpeza e validação
# =============================

def strip_code_fences(raw: str) -> str:
    """Remove ```json / ``` do início e ``` do fim, como os modelos costumam devolver."""
    text = (raw or "").strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"constante JSON não permitida: {name}")


def parse_strict(raw: str) -> Any:
    # NaN/Infinity são aceitos pelo json do Python mas não são JSON válido
    return json.loads(raw, parse_constant=_reject_constant)


def normalize_full(raw: str, video_info: VideoInfo) -> str:
    try:
        parsed = parse_strict(raw)
    except (ValueError, RecursionError):
        logger.error("Erro ao processar JSON retornado pela API Gemini", exc_info=True)
        parsed = full_analysis_fallback()

    return dumps_indented({
        "videoTitle": video_info.title,
        "videoChannel": video_info.author,
        "analysis": parsed,
    })


def normalize_simplified(raw: str) -> str:
    try:
        parse_strict(raw)
    except (ValueError, RecursionError):
        logger.error("Erro ao processar JSON retornado pela API Gemini", exc_info=True)
        return dumps_indented(simplified_fallback())
    # JSON válido: repassado exatamente como veio
    return raw


def normalize_response(shape: OutputShape, raw: str, video_info: VideoInfo) -> str:
    if shape == OutputShape.simplified:
        return normalize_simplified(raw)
    return normalize_full(raw, video_info)
