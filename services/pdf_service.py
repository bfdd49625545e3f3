# ===== Arquivo: services/pdf_service.py =====
from typing import Optional
import io
import logging

from pypdf import PdfReader

from utils.prompts.analysis_prompts import DEFAULT_REQUIREMENTS_TEXT

logger = logging.getLogger(__name__)

ENCRYPTED_PDF_MESSAGE = (
    "O documento PDF está criptografado. Por favor, forneça uma versão não criptografada."
)
PDF_EXTRACTION_ERROR_MESSAGE = (
    "Erro ao extrair texto do PDF. O documento pode estar danificado ou em um formato não compatível."
)

# Abaixo disso o texto do PDF é considerado inútil
MIN_REQUIREMENTS_LENGTH = 20


class PdfService:

    @classmethod
    def extract_text(cls, content: bytes, filename: Optional[str] = None) -> str:
        try:
            logger.info("Iniciando extração do PDF: %s, Tamanho: %d bytes", filename, len(content))

            try:
                reader = PdfReader(io.BytesIO(content))
            except Exception:
                logger.error("Erro ao inicializar PdfReader", exc_info=True)
                return cls._extract_text_alternative(content)

            # Criptografado é resultado final, não fallback
            if reader.is_encrypted:
                logger.warning("O PDF está criptografado e pode exigir senha para extração")
                return ENCRYPTED_PDF_MESSAGE

            logger.info("PdfReader inicializado, número de páginas: %d", len(reader.pages))

            chunks = []
            for number, page in enumerate(reader.pages, start=1):
                try:
                    page_text = page.extract_text() or ""
                    logger.info("Página %d extraída, caracteres: %d", number, len(page_text))
                    chunks.append(page_text + "\n")
                except Exception:
                    logger.warning("Erro ao extrair texto da página %d", number, exc_info=True)
                    chunks.append(f"[Erro ao extrair texto da página {number}]\n")

            result = "".join(chunks).strip()
            if not result:
                logger.warning("Nenhum texto extraído do PDF, tentando método alternativo")
                return cls._extract_text_alternative(content)

            return result
        except Exception:
            logger.error("Erro ao extrair texto do PDF", exc_info=True)
            return PDF_EXTRACTION_ERROR_MESSAGE

    @classmethod
    def _extract_text_alternative(cls, content: bytes) -> str:
        # Stub intencional: não existe um segundo parser, devolve os requisitos padrão
        logger.info("Tentando método alternativo de extração de texto do PDF (%d bytes)", len(content))
        return DEFAULT_REQUIREMENTS_TEXT

    @classmethod
    def extract_requirements(cls, content: bytes, filename: Optional[str] = None) -> str:
        text = cls.extract_text(content, filename)
        if len(text) < MIN_REQUIREMENTS_LENGTH:
            logger.warning("Texto extraído do PDF é muito curto ou vazio")
            return DEFAULT_REQUIREMENTS_TEXT
        return text
