"""
Conversões explícitas entre models e schemas do contexto Cadastros.
Cada função enumera os campos copiados.
"""
from app.api.cadastros.models.model_categoria import CategoriaModel
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.schemas.schema_categoria import CategoriaIn, CategoriaOut
from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteOut
from app.utils.cpf import normalizar_cpf


def cliente_from_create(data: ClienteCreate) -> ClienteModel:
    return ClienteModel(
        cpf=normalizar_cpf(data.cpf),
        nome_completo=data.nome_completo,
        email=data.email,
    )


def cliente_to_out(cliente: ClienteModel) -> ClienteOut:
    return ClienteOut(
        cpf=cliente.cpf,
        nome_completo=cliente.nome_completo,
        email=cliente.email,
        created_at=cliente.created_at,
        updated_at=cliente.updated_at,
    )


def categoria_from_in(data: CategoriaIn) -> CategoriaModel:
    return CategoriaModel(descricao=data.descricao)


def categoria_to_out(categoria: CategoriaModel) -> CategoriaOut:
    return CategoriaOut(
        id=categoria.id,
        descricao=categoria.descricao,
        created_at=categoria.created_at,
        updated_at=categoria.updated_at,
    )
