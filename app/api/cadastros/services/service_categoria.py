from typing import List

from app.api.cadastros.adapters.cadastros_mapper import categoria_from_in
from app.api.cadastros.contracts.categoria_contract import ICategoriaRepository
from app.api.cadastros.models.model_categoria import CategoriaModel
from app.api.cadastros.schemas.schema_categoria import CategoriaIn
from app.api.catalogo.contracts.produto_contract import IProdutoRepository
from app.core.exceptions import ErroNegocio
from app.utils.logger import logger


class CategoriaService:
    def __init__(self, repo: ICategoriaRepository, produto_repo: IProdutoRepository):
        self.repo = repo
        self.repo_produto = produto_repo

    def _obter(self, categoria_id: str) -> CategoriaModel:
        categoria = self.repo.buscar_por_id(categoria_id)
        if not categoria:
            raise ErroNegocio("categoria-nao-existe")
        return categoria

    def _descricao_disponivel(self, descricao: str, categoria_id: str | None = None) -> None:
        existente = self.repo.buscar_por_descricao(descricao)
        if existente and existente.id != categoria_id:
            raise ErroNegocio("categoria-descricao-cadastrada")

    def adicionar_categoria(self, data: CategoriaIn) -> CategoriaModel:
        self._descricao_disponivel(data.descricao)
        categoria = self.repo.salvar(categoria_from_in(data))
        logger.info(f"[Categorias] Criada id={categoria.id} descricao={categoria.descricao}")
        return categoria

    def atualizar_categoria_por_id(self, categoria_id: str, data: CategoriaIn) -> CategoriaModel:
        categoria = self._obter(categoria_id)
        self._descricao_disponivel(data.descricao, categoria.id)
        categoria.descricao = data.descricao
        return self.repo.salvar(categoria)

    def remover_categoria_por_id(self, categoria_id: str) -> None:
        self._obter(categoria_id)
        if self.repo_produto.buscar_por_categoria(categoria_id):
            raise ErroNegocio("categoria-possui-produtos")
        self.repo.remover(categoria_id)
        logger.info(f"[Categorias] Removida id={categoria_id}")

    def obter_categoria_por_id(self, categoria_id: str) -> CategoriaModel:
        return self._obter(categoria_id)

    def obter_categorias(self) -> List[CategoriaModel]:
        return self.repo.listar()
