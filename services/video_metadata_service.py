# ===== Arquivo: services/video_metadata_service.py =====
from typing import Optional
from urllib.parse import parse_qs, urlsplit
import logging
import re

import httpx

from models.analysis_request import VideoInfo

logger = logging.getLogger(__name__)

UNKNOWN_CHANNEL = "Canal desconhecido"
NO_DESCRIPTION = "Descrição não disponível"

# Padrões em ordem de preferência; o HTML do YouTube muda sem aviso
TITLE_TAG_PATTERN = re.compile(r"<title>([^<]*) - YouTube</title>")
META_TITLE_PATTERN = re.compile(r'<meta name="title" content="([^"]*)"')
TITLE_PATTERNS = (TITLE_TAG_PATTERN, META_TITLE_PATTERN)
CHANNEL_PATTERNS = (
    re.compile(r'"ownerChannelName":"([^"]*)"'),
    re.compile(r'<link itemprop="name" content="([^"]*)">'),
)
YOUTUBE_SUFFIX = " - YouTube"


def extract_video_id(youtube_url: str) -> Optional[str]:
    """
    https://www.youtube.com/watch?v=ID -> ID
    https://youtu.be/ID               -> ID
    qualquer outra coisa               -> None
    """
    try:
        parts = urlsplit(youtube_url)
        host = parts.hostname or ""
        path_and_query = parts.path + ("?" + parts.query if parts.query else "")

        if "youtube.com" in host and "watch" in path_and_query:
            values = parse_qs(parts.query).get("v")
            return values[0] if values else None

        if "youtu.be" in host:
            return parts.path.lstrip("/")

        return None
    except Exception:
        return None


def placeholder_title(video_id: str) -> str:
    return f"Vídeo YouTube {video_id}"


def extract_title(html: str) -> Optional[str]:
    try:
        for pattern in TITLE_PATTERNS:
            match = pattern.search(html)
            if match:
                title = match.group(1).strip()
                # O sufixo já fica fora do grupo no <title>, só a meta o traz
                if pattern is META_TITLE_PATTERN and title.endswith(YOUTUBE_SUFFIX):
                    title = title[: -len(YOUTUBE_SUFFIX)].strip()
                return title
        return None
    except Exception:
        return None


def extract_channel(html: str) -> Optional[str]:
    try:
        for pattern in CHANNEL_PATTERNS:
            match = pattern.search(html)
            if match:
                return match.group(1).strip()
        return None
    except Exception:
        return None


class VideoMetadataService:
    def __init__(self, http_client: httpx.AsyncClient, watch_url: str, timeout: float):
        self.http_client = http_client
        self.watch_url = watch_url
        self.timeout = timeout

    def fallback_info(self, video_id: str) -> VideoInfo:
        return VideoInfo(
            title=placeholder_title(video_id),
            author=UNKNOWN_CHANNEL,
            description=NO_DESCRIPTION,
        )

    async def get_video_info(self, video_id: str) -> VideoInfo:
        """Scraping básico da página pública do vídeo. Nunca levanta."""
        try:
            response = await self.http_client.get(
                self.watch_url, params={"v": video_id}, timeout=self.timeout
            )
            if response.is_success:
                html = response.text
                title = extract_title(html)
                channel = extract_channel(html)
                return VideoInfo(
                    title=title or placeholder_title(video_id),
                    author=channel or UNKNOWN_CHANNEL,
                    description=NO_DESCRIPTION,
                )
            logger.warning("Página do vídeo %s respondeu %s. Usando valores padrão.", video_id, response.status_code)
        except Exception:
            logger.warning("Erro ao tentar obter informações do YouTube. Usando valores padrão.", exc_info=True)

        return self.fallback_info(video_id)
