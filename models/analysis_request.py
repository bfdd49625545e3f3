# ===== Arquivo: models/analysis_request.py =====

from pydantic import BaseModel
from typing import Optional
from enum import Enum

class OutputShape(str, Enum):
    full = "full"                # rubrica completa, embrulhada com título/canal
    simplified = "simplified"    # 3 campos, JSON do modelo repassado como veio

class AnalysisRequest(BaseModel):
    youtube_url: Optional[str] = None
    pdf_content: Optional[bytes] = None
    pdf_filename: Optional[str] = None

class VideoInfo(BaseModel):
    title: str
    author: str
    description: str = "Descrição não disponível"
