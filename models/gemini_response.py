# ===== Arquivo: models/gemini_response.py =====

from pydantic import BaseModel
from typing import List, Optional

# Apenas o caminho candidates[0].content.parts[0].text interessa; o resto é ignorado

class GeminiPart(BaseModel):
    text: Optional[str] = None

class GeminiContent(BaseModel):
    parts: List[GeminiPart] = []

class GeminiCandidate(BaseModel):
    content: Optional[GeminiContent] = None

class GeminiResponse(BaseModel):
    candidates: List[GeminiCandidate] = []

    def first_text(self) -> Optional[str]:
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text
