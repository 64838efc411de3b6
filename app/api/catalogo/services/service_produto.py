from typing import List, Optional

from app.api.cadastros.contracts.categoria_contract import ICategoriaRepository
from app.api.cadastros.models.model_categoria import CategoriaModel
from app.api.catalogo.adapters.produto_mapper import aplicar_produto_in
from app.api.catalogo.contracts.produto_contract import IProdutoRepository
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.catalogo.schemas.schema_produto import ProdutoIn
from app.core.exceptions import ErroNegocio
from app.utils.logger import logger


class ProdutoService:
    def __init__(self, repo: IProdutoRepository, categoria_repo: ICategoriaRepository):
        self.repo = repo
        self.repo_categoria = categoria_repo

    def _obter(self, produto_id: str) -> ProdutoModel:
        produto = self.repo.buscar_por_id(produto_id)
        if not produto:
            raise ErroNegocio("produto-nao-existe")
        return produto

    def _categoria_obrigatoria(self, categoria_id: Optional[str]) -> CategoriaModel:
        if not categoria_id:
            raise ErroNegocio("produto-categoria-nao-existe")
        categoria = self.repo_categoria.buscar_por_id(categoria_id)
        if not categoria:
            raise ErroNegocio("produto-categoria-nao-existe")
        return categoria

    def adicionar_produto(self, data: ProdutoIn) -> ProdutoModel:
        categoria = self._categoria_obrigatoria(data.categoria_id)

        produto = aplicar_produto_in(ProdutoModel(), data)
        produto.categoria = categoria
        produto.categoria_id = categoria.id
        produto.validar()

        produto = self.repo.salvar(produto)
        logger.info(f"[Produtos] Criado id={produto.id} nome={produto.nome}")
        return produto

    def atualizar_produto_por_id(self, produto_id: str, data: ProdutoIn) -> ProdutoModel:
        categoria = self._categoria_obrigatoria(data.categoria_id)
        produto = self._obter(produto_id)

        aplicar_produto_in(produto, data)
        produto.categoria = categoria
        produto.categoria_id = categoria.id
        produto.validar()

        return self.repo.salvar(produto)

    def remover_produto_por_id(self, produto_id: str) -> None:
        self._obter(produto_id)
        self.repo.remover(produto_id)
        logger.info(f"[Produtos] Removido id={produto_id}")

    def obter_produto_por_id(self, produto_id: str) -> ProdutoModel:
        return self._obter(produto_id)

    def obter_produtos(self) -> List[ProdutoModel]:
        return self.repo.listar()

    def obter_produtos_por_categoria(self, categoria_id: str) -> List[ProdutoModel]:
        categoria = self.repo_categoria.buscar_por_id(categoria_id)
        if not categoria:
            raise ErroNegocio("produto-categoria-nao-existe")
        return self.repo.buscar_por_categoria(categoria_id)
