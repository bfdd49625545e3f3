import asyncio

import httpx
import pytest

from services.video_metadata_service import (
    NO_DESCRIPTION,
    UNKNOWN_CHANNEL,
    VideoMetadataService,
    extract_channel,
    extract_title,
    extract_video_id,
)


@pytest.mark.parametrize("url, expected", [
    ("https://www.youtube.com/watch?v=abc123", "abc123"),
    ("https://youtube.com/watch?list=PL1&v=abc123&t=30s", "abc123"),
    ("https://m.youtube.com/watch?v=abc123", "abc123"),
    ("https://youtu.be/abc123", "abc123"),
    ("https://www.youtube.com/watch?list=PL1", None),
    ("https://www.youtube.com/channel/UC123", None),
    ("https://example.com/x", None),
    ("http://[invalido/x", None),
])
def test_extract_video_id(url, expected):
    assert extract_video_id(url) == expected


def test_title_from_title_tag():
    assert extract_title("<title>Aula 1 - YouTube</title>") == "Aula 1"


def test_title_from_meta_tag_strips_suffix():
    html = '<meta name="title" content="Aula 2 - YouTube">'
    assert extract_title(html) == "Aula 2"


def test_title_missing():
    assert extract_title("<html></html>") is None


def test_channel_prefers_owner_channel_name():
    html = '<link itemprop="name" content="Outro">{"ownerChannelName":"Cifra Club"}'
    assert extract_channel(html) == "Cifra Club"


def test_channel_from_link_tag():
    assert extract_channel('<link itemprop="name" content="Cifra Club">') == "Cifra Club"


def test_channel_missing():
    assert extract_channel("<html></html>") is None


def _fetch(handler, video_id="abc123"):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            service = VideoMetadataService(client, "https://www.youtube.com/watch", timeout=1.0)
            return await service.get_video_info(video_id)

    return asyncio.run(run())


def test_get_video_info_scrapes_page():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(
            200,
            text='<title>Aula 3 - YouTube</title>"ownerChannelName":"Cifra Club"',
        )

    info = _fetch(handler)

    assert str(seen[0].url) == "https://www.youtube.com/watch?v=abc123"
    assert info.title == "Aula 3"
    assert info.author == "Cifra Club"
    assert info.description == NO_DESCRIPTION


def test_get_video_info_partial_scrape_uses_placeholders():
    info = _fetch(lambda request: httpx.Response(200, text="<html>sem nada</html>"))

    assert info.title == "Vídeo YouTube abc123"
    assert info.author == UNKNOWN_CHANNEL


def test_get_video_info_non_success_status():
    info = _fetch(lambda request: httpx.Response(503, text="indisponivel"))

    assert info.title == "Vídeo YouTube abc123"
    assert info.author == UNKNOWN_CHANNEL
    assert info.description == NO_DESCRIPTION


def test_get_video_info_network_error():
    def handler(request):
        raise httpx.ConnectError("sem rede", request=request)

    info = _fetch(handler)

    assert info.title == "Vídeo YouTube abc123"
    assert info.author == UNKNOWN_CHANNEL


def test_title_tag_wins_over_meta_tag():
    html = '<meta name="title" content="Título da meta"><title>Título da aba - YouTube</title>'
    assert extract_title(html) == "Título da aba"


def test_title_tag_keeps_inner_suffix_text():
    # Só o sufixo final é removido pelo padrão do <title>
    assert extract_title("<title>Aula - YouTube - YouTube</title>") == "Aula - YouTube"
