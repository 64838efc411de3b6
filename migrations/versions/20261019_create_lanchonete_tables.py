"""Create clientes, categorias, produtos, pedido_status, pedidos and pedido_produto tables

Revision ID: 20261019_create_lanchonete_tables
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_create_lanchonete_tables"
down_revision = None
branch_labels = None
depends_on = None

STATUS_INICIAIS = [
    ("pedido_recebido", "Pedido recebido."),
    ("pedido_em_preparacao", "Pedido em preparação."),
    ("pedido_pronto", "Pedido pronto."),
    ("pedido_finalizado", "Pedido finalizado."),
    ("pedido_cancelado", "Pedido cancelado."),
]


def upgrade() -> None:
    op.create_table(
        "clientes",
        sa.Column("cpf", sa.String(11), primary_key=True),
        sa.Column("nome_completo", sa.String(150), nullable=False),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
    )

    op.create_table(
        "categorias",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("descricao", sa.String(100), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
    )

    op.create_table(
        "produtos",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("nome", sa.String(120), nullable=False),
        sa.Column("descricao", sa.String(255), nullable=False),
        sa.Column("preco", sa.Numeric(18, 2), nullable=False),
        sa.Column("categoria_id", sa.String(36), sa.ForeignKey("categorias.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("created_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint("preco >= 0", name="chk_produto_preco_nao_negativo"),
    )

    status_table = op.create_table(
        "pedido_status",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("tag", sa.String(50), nullable=False, unique=True),
        sa.Column("descricao", sa.String(255), nullable=False),
    )

    op.create_table(
        "pedidos",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("cliente_cpf", sa.String(11), sa.ForeignKey("clientes.cpf", ondelete="CASCADE"), nullable=False),
        sa.Column("status_id", sa.String(36), sa.ForeignKey("pedido_status.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("valor_total", sa.Numeric(18, 2), nullable=False, server_default="0"),
        sa.Column("pagamento_status", sa.String(50), nullable=False, server_default="pagamento_pendente"),
        sa.Column("data_cadastro", sa.DateTime, server_default=sa.text("now()"), nullable=False),
        sa.Column("data_atualizacao", sa.DateTime, server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("idx_pedidos_cliente", "pedidos", ["cliente_cpf"])
    op.create_index("idx_pedidos_status", "pedidos", ["status_id"])

    op.create_table(
        "pedido_produto",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("quantidade", sa.Integer, nullable=False),
        sa.Column("posicao", sa.Integer, nullable=False, server_default="0"),
        sa.Column("pedido_id", sa.String(36), sa.ForeignKey("pedidos.id", ondelete="CASCADE"), nullable=False),
        sa.Column("produto_id", sa.String(36), sa.ForeignKey("produtos.id", ondelete="CASCADE"), nullable=False),
        sa.CheckConstraint("quantidade > 0", name="chk_pedido_produto_quantidade_positiva"),
    )
    op.create_index("idx_pedido_produto_pedido", "pedido_produto", ["pedido_id"])

    # Registro de status: sem ele nenhum pedido pode ser criado
    op.bulk_insert(
        status_table,
        [
            {"id": f"00000000-0000-0000-0000-00000000000{i}", "tag": tag, "descricao": descricao}
            for i, (tag, descricao) in enumerate(STATUS_INICIAIS, start=1)
        ],
    )


def downgrade() -> None:
    op.drop_index("idx_pedido_produto_pedido", table_name="pedido_produto")
    op.drop_index("idx_pedidos_status", table_name="pedidos")
    op.drop_index("idx_pedidos_cliente", table_name="pedidos")

    op.drop_table("pedido_produto")
    op.drop_table("pedidos")
    op.drop_table("pedido_status")
    op.drop_table("produtos")
    op.drop_table("categorias")
    op.drop_table("clientes")
