# ===== Arquivo: utils/errors.py =====


class ConfigurationError(Exception):
    """Configuração obrigatória ausente (ex.: chave da API Gemini). Vira HTTP 500."""


class InvalidArgument(ValueError):
    """Entrada inválida do cliente (URL, PDF, ID do vídeo). Vira HTTP 400."""


class UpstreamDegraded(Exception):
    """
    Falha de uma dependência externa. Nunca chega ao cliente:
    quem captura substitui por um valor de fallback documentado.
    """

    def __init__(self, message: str, status_code: int = 0, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
