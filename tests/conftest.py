import io
import json
from typing import Callable, Dict, List, Optional

import httpx
import pytest
from pypdf import PdfWriter

from utils.config import Settings


def build_text_pdf(page_texts: List[str]) -> bytes:
    """Monta um PDF mínimo, com uma página por texto (fonte Helvetica)."""
    n_pages = len(page_texts)
    font_id = 3 + 2 * n_pages
    page_ids = [3 + 2 * i for i in range(n_pages)]

    objects: Dict[int, bytes] = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: ("<< /Type /Pages /Kids [%s] /Count %d >>"
            % (" ".join(f"{pid} 0 R" for pid in page_ids), n_pages)).encode(),
        font_id: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for pid, text in zip(page_ids, page_texts):
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
        objects[pid] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Contents {pid + 1} 0 R /Resources << /Font << /F1 {font_id} 0 R >> >> >>"
        ).encode()
        objects[pid + 1] = (
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = {}
    for obj_id in sorted(objects):
        offsets[obj_id] = out.tell()
        out.write(b"%d 0 obj\n" % obj_id + objects[obj_id] + b"\nendobj\n")

    xref_at = out.tell()
    size = max(objects) + 1
    out.write(b"xref\n0 %d\n" % size)
    out.write(b"0000000000 65535 f \n")
    for obj_id in range(1, size):
        out.write(b"%010d 00000 n \n" % offsets[obj_id])
    out.write(b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_at))
    return out.getvalue()


def build_blank_pdf(pages: int = 1, password: Optional[str] = None) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    if password:
        writer.encrypt(password)
    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


WATCH_HTML = (
    "<html><head><title>Aula de violão: acordes básicos - YouTube</title></head>"
    '<body><script>var ytInitialPlayerResponse = {"videoDetails":'
    '{"ownerChannelName":"Cifra Club"}};</script></body></html>'
)


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="test-key",
        gemini_model="gemini-1.5-flash",
        metadata_timeout_seconds=1.0,
        generation_timeout_seconds=1.0,
    )


@pytest.fixture
def text_pdf():
    return build_text_pdf(["Requisitos de avaliacao para aulas de violao iniciantes"])


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """
    Transporte falso para o YouTube e o Gemini. Guarda as requisições recebidas em .calls.
    """

    def _make(gemini_text: Optional[str] = None,
              gemini_status: int = 200,
              gemini_body: Optional[str] = None,
              watch_html: str = WATCH_HTML,
              watch_status: int = 200) -> httpx.MockTransport:
        calls: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if request.url.host == "www.youtube.com":
                return httpx.Response(watch_status, text=watch_html)
            if request.url.host == "generativelanguage.googleapis.com":
                if gemini_body is not None:
                    return httpx.Response(gemini_status, text=gemini_body)
                return httpx.Response(gemini_status, json=gemini_payload(gemini_text or "{}"))
            return httpx.Response(404, text="not found")

        transport = httpx.MockTransport(handler)
        transport.calls = calls
        return transport

    return _make


def json_body(text: str):
    return json.loads(text)
