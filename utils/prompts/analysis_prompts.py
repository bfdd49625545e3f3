# ===== utils/prompts/analysis_prompts.py  —  prompts da análise de videoaulas =====
from __future__ import annotations

from models.analysis_request import OutputShape, VideoInfo

# =========================
# 0) Contexto do avaliador
# =========================
CONTEXT_BLOCK = (
    "**Contexto:** Você é um assistente de IA especializado em avaliar vídeos educativos de música, "
    "especificamente para aulas de violão do CifraClub."
)

# Passagem usada quando o PDF não rende texto útil
DEFAULT_REQUIREMENTS_TEXT = """Este documento contém requisitos para análise de vídeos de música.

Requisitos de análise:
1. Didática na explicação: avaliar a clareza das instruções e explicações
2. Linguagem utilizada: avaliar a terminologia e comunicação usada
3. Adequação ao nível:
   - número de acordes utilizados
   - tipos de acordes (naturais/suspensos)

Os vídeos devem ser analisados considerando a qualidade da instrução musical,
facilidade de compreensão e adequação ao nível indicado."""


def build_placeholder_transcript(video_id: str) -> str:
    # Não há extração real de legendas; o texto é fictício de propósito
    return (
        "Esta é uma transcrição fictícia para demonstração. "
        "Em um ambiente real, você precisaria implementar a extração das legendas "
        "do vídeo com ID " + video_id + "."
    )


# ==========================================
# 1) Estruturas JSON pedidas ao modelo
# ==========================================
_SCALE = "// Sim, Às vezes, Não, Não observado"

FULL_SCHEMA_BLOCK = f"""{{
  "avaliacao": {{
    "interacao_engajamento": {{
      "estimula_pratica_ativa": "", {_SCALE}
      "explicacao_clara_objetiva": "", {_SCALE}
      "reconhece_dificuldades": "" {_SCALE}
    }},
    "metodologia_ensino": {{
      "divide_etapas_logicas": "", {_SCALE}
      "utiliza_recursos_visuais": "", {_SCALE}
      "proporciona_tempo_assimilacao": "", {_SCALE}
      "clareza_postura_gestos": "" {_SCALE}
    }},
    "apropriacao_conteudo": {{
      "dominio_tecnico": "", {_SCALE}
      "contextualiza_musica": "" {_SCALE}
    }},
    "organizacao": {{
      "duracao_adequada": "", {_SCALE}
      "recursos_complementares": "" {_SCALE}
    }},
    "nivel_proficiencia": "", // A1, A2, B1, B2, C1 ou C2
    "observacoes": "", // Observações gerais sobre o vídeo
    "numero_acordes": 0, // Estimativa do número de acordes ensinados
    "tipos_acordes": "" // Descrição dos tipos de acordes (naturais/suspensos/etc)
  }}
}}"""

SIMPLIFIED_SCHEMA_BLOCK = """{
  "Didática na explicação": "", // Avaliação da didática e clareza
  "Linguagem utilizada": "", // Avaliação da terminologia e comunicação
  "Adequação ao nível": {
    "número de acordes": 0, // Estimativa do número de acordes ensinados
    "tipos de acordes (naturais/suspensos)": "" // Descrição dos tipos de acordes
  }
}"""

FULL_CLOSING = (
    "Baseie sua avaliação nos critérios da Matriz de Proficiência fornecida. Para o nível de proficiência, "
    "use as descrições A1 (Iniciante), A2 (Básico), B1 (Intermediário), B2 (Pós-intermediário), "
    "C1 (Avançado) ou C2 (Domínio pleno) conforme definido no documento.\n"
    "\n"
    "IMPORTANTE: Retorne APENAS o objeto JSON, sem texto adicional antes ou depois."
)

SIMPLIFIED_CLOSING = (
    "Baseie sua avaliação nos critérios da Matriz de Proficiência fornecida.\n"
    "\n"
    "IMPORTANTE: Retorne APENAS o objeto JSON, sem texto adicional antes ou depois. "
    "Certifique-se de seguir EXATAMENTE a estrutura solicitada."
)


# =======================================================
# 2) Construtor do prompt (um só, parametrizado pelo formato)
# =======================================================
def _video_block(video_info: VideoInfo, video_url: str) -> str:
    return (
        "**Informações do Vídeo:**\n"
        f"- URL: {video_url}\n"
        f"- Título: {video_info.title}\n"
        f"- Canal: {video_info.author}\n"
    )


def _material_block(requirements_text: str, transcript: str) -> str:
    return (
        "**Matriz de Proficiência para Avaliação:**\n"
        "```\n"
        f"{requirements_text}\n"
        "```\n"
        "\n"
        "**Transcrição Simulada do Vídeo:**\n"
        "```text\n"
        f"{transcript}\n"
        "```\n"
    )


def build_analysis_prompt(
    shape: OutputShape,
    video_info: VideoInfo,
    transcript: str,
    video_url: str,
    requirements_text: str,
) -> str:
    if shape == OutputShape.simplified:
        task = (
            "Analise o vídeo de acordo com a Matriz de Proficiência fornecida e retorne um objeto JSON "
            "com a seguinte estrutura SIMPLIFICADA:"
        )
        schema_block, closing = SIMPLIFIED_SCHEMA_BLOCK, SIMPLIFIED_CLOSING
    else:
        task = (
            "Analise o vídeo de acordo com a Matriz de Proficiência fornecida e retorne um objeto JSON "
            "com a seguinte estrutura:"
        )
        schema_block, closing = FULL_SCHEMA_BLOCK, FULL_CLOSING

    return (
        f"{CONTEXT_BLOCK}\n"
        f"{_video_block(video_info, video_url)}"
        "\n"
        f"{_material_block(requirements_text, transcript)}"
        "\n"
        "**Sua Tarefa:**\n"
        f"{task}\n"
        f"{schema_block}\n"
        "\n"
        f"{closing}"
    )
