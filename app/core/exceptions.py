"""
Exceções de domínio da aplicação.

- ErroNegocio: condição esperada, voltada ao chamador, identificada por um
  código estável (ex.: "cliente-nao-cadastrado"). Vira resposta 4xx.
- ErroConfiguracao: implantação quebrada (ex.: status obrigatório não
  semeado). Nunca é convertida em ErroNegocio; vira 500.
"""
from starlette import status


# Códigos que representam "recurso não encontrado"
CODIGOS_NAO_ENCONTRADO = {
    "cliente-nao-cadastrado",
    "categoria-nao-existe",
    "produto-nao-existe",
    "pedido-nao-existe",
    "pedido-status-nao-existe",
}


class ErroNegocio(Exception):
    """Erro de negócio com código estável."""

    def __init__(self, codigo: str):
        super().__init__(codigo)
        self.codigo = codigo

    @property
    def status_code(self) -> int:
        if self.codigo in CODIGOS_NAO_ENCONTRADO:
            return status.HTTP_404_NOT_FOUND
        return status.HTTP_400_BAD_REQUEST


class ErroConfiguracao(RuntimeError):
    """Falha de configuração/implantação; não deve ser tratada como erro de negócio."""
