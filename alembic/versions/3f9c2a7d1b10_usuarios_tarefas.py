"""usuarios and tarefas

Revision ID: 3f9c2a7d1b10
Revises: 
Create Date: 2026-10-17 20:05:12.418305

"""
from alembic import op
import sqlalchemy as sa


revision = '3f9c2a7d1b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("nome", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("senha", sa.String(), nullable=False),
        sa.Column("reset_token", sa.String(), nullable=True),
        sa.Column("reset_token_expires", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_usuarios_email", "usuarios", ["email"], unique=True)
    op.create_index("ix_usuarios_reset_token", "usuarios", ["reset_token"], unique=False)

    op.create_table(
        "tarefas",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("texto", sa.String(), nullable=False),
        sa.Column("prazo", sa.Date(), nullable=True),
        sa.Column("prioridade", sa.String(), nullable=True),
        sa.Column("usuario_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["usuario_id"], ["usuarios.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tarefas_usuario_id", "tarefas", ["usuario_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_tarefas_usuario_id", table_name="tarefas")
    op.drop_table("tarefas")
    op.drop_index("ix_usuarios_reset_token", table_name="usuarios")
    op.drop_index("ix_usuarios_email", table_name="usuarios")
    op.drop_table("usuarios")
