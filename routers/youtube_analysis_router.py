# ===== Arquivo: routers/youtube_analysis_router.py =====
from typing import Union
import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import PlainTextResponse, Response
from starlette.datastructures import UploadFile as StarletteUploadFile

from models.analysis_request import AnalysisRequest, OutputShape
from services.youtube_analysis_service import YouTubeAnalysisService
from utils.errors import ConfigurationError, InvalidArgument

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/YouTubeAnalysis", tags=["YouTubeAnalysis"])


def get_analysis_service(request: Request) -> YouTubeAnalysisService:
    return request.app.state.analysis_service


async def _run(service: YouTubeAnalysisService,
               youtube_url: str,
               requirements_pdf: Union[UploadFile, str, None],
               shape: OutputShape) -> Response:
    # requirementsPdf enviado como campo de texto conta como arquivo ausente
    if not isinstance(requirements_pdf, StarletteUploadFile):
        requirements_pdf = None

    try:
        content = await requirements_pdf.read() if requirements_pdf is not None else None
        request = AnalysisRequest(
            youtube_url=youtube_url,
            pdf_content=content,
            pdf_filename=requirements_pdf.filename if requirements_pdf is not None else None,
        )
        body = await service.analyze(request, shape)
        return Response(content=body, media_type="application/json", status_code=200)
    except InvalidArgument as e:
        return PlainTextResponse(str(e), status_code=400)
    except ConfigurationError as e:
        return PlainTextResponse(str(e), status_code=500)
    except Exception:
        # Detalhe da exceção fica só no log
        logger.exception("Erro ao processar a análise do vídeo")
        return PlainTextResponse("Erro ao processar a análise.", status_code=500)


@router.post("/analyze")
async def analyze(youtube_url: str = Form("", alias="youtubeUrl"),
                  requirements_pdf: Union[UploadFile, str, None] = File(None, alias="requirementsPdf"),
                  service: YouTubeAnalysisService = Depends(get_analysis_service)):
    return await _run(service, youtube_url, requirements_pdf, OutputShape.full)


@router.post("/analyze-simplified")
async def analyze_simplified(youtube_url: str = Form("", alias="youtubeUrl"),
                             requirements_pdf: Union[UploadFile, str, None] = File(None, alias="requirementsPdf"),
                             service: YouTubeAnalysisService = Depends(get_analysis_service)):
    return await _run(service, youtube_url, requirements_pdf, OutputShape.simplified)
