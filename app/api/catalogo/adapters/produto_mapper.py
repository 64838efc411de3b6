from app.api.cadastros.adapters.cadastros_mapper import categoria_to_out
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.catalogo.schemas.schema_produto import ProdutoIn, ProdutoOut


def aplicar_produto_in(produto: ProdutoModel, data: ProdutoIn) -> ProdutoModel:
    """Copia os campos editáveis do request para o model (criação e atualização)."""
    produto.nome = data.nome
    produto.descricao = data.descricao
    produto.preco = data.preco
    return produto


def produto_to_out(produto: ProdutoModel) -> ProdutoOut:
    return ProdutoOut(
        id=produto.id,
        nome=produto.nome,
        descricao=produto.descricao,
        preco=produto.preco,
        categoria=categoria_to_out(produto.categoria) if produto.categoria else None,
        created_at=produto.created_at,
        updated_at=produto.updated_at,
    )
