# ===== Arquivo: services/youtube_analysis_service.py =====
from typing import Optional
import asyncio
import logging

import httpx
from pydantic import AnyUrl, TypeAdapter, ValidationError

from models.analysis_request import AnalysisRequest, OutputShape, VideoInfo
from services.pdf_service import PdfService
from services.video_metadata_service import VideoMetadataService, extract_video_id
from utils.config import Settings
from utils.errors import ConfigurationError, InvalidArgument
from utils.llm.gemini_client import GeminiClient
from utils.prompts.analysis_prompts import build_analysis_prompt, build_placeholder_transcript
from utils.response_normalizer import normalize_response

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_well_formed_absolute_url(value: Optional[str]) -> bool:
    if not value or not value.strip():
        return False
    # Espaços no meio não são aceitos (o AnyUrl os escaparia silenciosamente)
    if any(ch.isspace() for ch in value):
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return bool(url.scheme and url.host)


class YouTubeAnalysisService:
    """
    Pipeline único para os dois endpoints; o OutputShape só muda o prompt
    e a forma como a resposta do modelo é normalizada.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.gemini = GeminiClient(settings, http_client)
        self.metadata = VideoMetadataService(
            http_client,
            watch_url=settings.youtube_watch_url,
            timeout=settings.metadata_timeout_seconds,
        )
        if not settings.has_gemini_key:
            logger.error("Chave da API Gemini (GEMINI_API_KEY) não encontrada na configuração.")

    def validate(self, request: AnalysisRequest) -> None:
        if not self.settings.has_gemini_key:
            logger.warning("Tentativa de análise sem chave de API Gemini configurada.")
            raise ConfigurationError("Erro de configuração interna do servidor (API Key).")

        if not is_well_formed_absolute_url(request.youtube_url):
            logger.warning("URL do YouTube inválida fornecida: %s", request.youtube_url)
            raise InvalidArgument("URL do YouTube inválida.")

        if not request.pdf_content:
            logger.warning("Arquivo PDF de requisitos não foi enviado")
            raise InvalidArgument("É necessário enviar um arquivo PDF com os requisitos para análise.")

    async def analyze(self, request: AnalysisRequest, shape: OutputShape) -> str:
        """Devolve o corpo JSON da resposta. Só levanta para erros de validação/configuração ou falhas inesperadas."""
        logger.info(">>> Iniciando análise (%s) do YouTube para URL: %s", shape.value, request.youtube_url)
        self.validate(request)

        video_id = extract_video_id(request.youtube_url)
        if not video_id:
            raise InvalidArgument(
                "ID do vídeo não pôde ser extraído da URL. Verifique se é uma URL válida do YouTube."
            )

        # pypdf é síncrono; fora do event loop para não travar as outras requisições
        requirements_text = await asyncio.to_thread(
            PdfService.extract_requirements, request.pdf_content, request.pdf_filename
        )
        video_info: VideoInfo = await self.metadata.get_video_info(video_id)
        transcript = build_placeholder_transcript(video_id)

        prompt = build_analysis_prompt(
            shape=shape,
            video_info=video_info,
            transcript=transcript,
            video_url=request.youtube_url,
            requirements_text=requirements_text,
        )
        raw = await self.gemini.generate_analysis(prompt)
        return normalize_response(shape, raw, video_info)
