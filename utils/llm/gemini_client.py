# ===== Arquivo: utils/llm/gemini_client.py =====
from __future__ import annotations
from typing import Any, Dict
import logging

import httpx

from models.gemini_response import GeminiResponse
from utils.config import Settings
from utils.errors import UpstreamDegraded
from utils.response_normalizer import (
    GEMINI_UNAVAILABLE_JSON,
    gemini_error_json,
    strip_code_fences,
)

logger = logging.getLogger(__name__)

# Temperatura baixa para respostas mais estruturadas
GENERATION_CONFIG = {
    "temperature": 0.2,
    "topP": 0.95,
    "topK": 40,
}


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


class GeminiClient:
    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.http_client = http_client

    async def _send_request(self, prompt: str) -> str:
        """
        Faz o POST no generateContent e devolve o texto do primeiro candidato, sem cercas markdown.
        Levanta UpstreamDegraded se o status não for 2xx ou se não houver candidates/parts.
        """
        response = await self.http_client.post(
            self.settings.gemini_generate_url,
            params={"key": self.settings.gemini_api_key},
            json=build_request_body(prompt),
            timeout=self.settings.generation_timeout_seconds,
        )

        if response.is_success:
            text = GeminiResponse.model_validate(response.json()).first_text()
            if text is not None:
                return strip_code_fences(text)

        raise UpstreamDegraded(
            "Resposta da API Gemini sem conteúdo utilizável",
            status_code=response.status_code,
            body=response.text,
        )

    async def generate_analysis(self, prompt: str) -> str:
        """Nunca levanta: em qualquer falha devolve um JSON de fallback no formato simplificado."""
        try:
            return await self._send_request(prompt)
        except UpstreamDegraded as e:
            logger.warning("Resposta da API Gemini: %s", e.status_code)
            logger.warning("Erro da API Gemini: %s", e.body)
            return GEMINI_UNAVAILABLE_JSON
        except Exception as e:
            logger.error("Erro ao analisar com Gemini", exc_info=True)
            return gemini_error_json(str(e))
