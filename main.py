# ===== Arquivo: main.py =====
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager
from typing import Optional
import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routers.youtube_analysis_router import router as youtube_analysis_router
from services.youtube_analysis_service import YouTubeAnalysisService
from utils.config import Settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    # O httpx loga a URL completa de cada requisição, e a do Gemini leva ?key=
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Um único pool de conexões de saída por processo (YouTube + Gemini)
        async with httpx.AsyncClient(transport=transport, follow_redirects=True) as http_client:
            app.state.analysis_service = YouTubeAnalysisService(settings, http_client)
            yield

    app = FastAPI(title="Análise de Videoaulas API", version="1.0", lifespan=lifespan)
    app.state.settings = settings

    # Configuração de CORS para permitir acesso do frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Inclui as rotas do router
    app.include_router(youtube_analysis_router)

    # Endpoint de teste
    @app.get("/")
    async def root():
        return {"message": "API de Análise de Videoaulas Online"}

    return app


app = create_app()
