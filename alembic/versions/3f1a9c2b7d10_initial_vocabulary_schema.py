"""initial_vocabulary_schema

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-10-19 09:12:31.418022

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1a9c2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

test_type_enum = sa.Enum(
    "english_to_japanese", "japanese_to_english", "mixed", name="test_type"
)
question_type_enum = sa.Enum(
    "english_to_japanese", "japanese_to_english", name="question_type"
)


def upgrade() -> None:
    """Upgrade schema."""
    categories = op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_categories"),
        sa.UniqueConstraint("name", name="uq_categories_name"),
    )

    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("english", sa.String(length=255), nullable=False),
        sa.Column("japanese", sa.String(length=255), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("difficulty", sa.Integer(), nullable=False),
        sa.Column("frequency", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint(
            "difficulty BETWEEN 1 AND 5", name="ck_words_difficulty_range"
        ),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name="fk_words_category_id_categories",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_words"),
    )
    op.create_index("ix_words_english", "words", ["english"])
    op.create_index("ix_words_japanese", "words", ["japanese"])
    op.create_index("ix_words_category_id", "words", ["category_id"])

    op.create_table(
        "tests",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("test_type", test_type_enum, nullable=False),
        sa.Column("question_count", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name="fk_tests_category_id_categories",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_tests"),
    )

    op.create_table(
        "test_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("test_id", sa.Integer(), nullable=False),
        sa.Column("word_id", sa.Integer(), nullable=False),
        sa.Column("question_order", sa.Integer(), nullable=False),
        sa.Column("question_type", question_type_enum, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["test_id"],
            ["tests.id"],
            name="fk_test_items_test_id_tests",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["word_id"],
            ["words.id"],
            name="fk_test_items_word_id_words",
            ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_test_items"),
        sa.UniqueConstraint("test_id", "question_order", name="uq_test_items_order"),
    )
    op.create_index("ix_test_items_test_id", "test_items", ["test_id"])
    op.create_index("ix_test_items_word_id", "test_items", ["word_id"])

    op.create_table(
        "test_history",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("test_id", sa.Integer(), nullable=False),
        sa.Column(
            "used_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["test_id"],
            ["tests.id"],
            name="fk_test_history_test_id_tests",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_test_history"),
    )
    op.create_index("ix_test_history_test_id", "test_history", ["test_id"])

    # Категория по умолчанию
    op.bulk_insert(
        categories,
        [{"id": 1, "name": "基本単語", "description": "デフォルトカテゴリ"}],
    )
    if op.get_bind().dialect.name == "postgresql":
        op.execute(
            "SELECT setval(pg_get_serial_sequence('categories', 'id'), "
            "(SELECT MAX(id) FROM categories))"
        )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_test_history_test_id", table_name="test_history")
    op.drop_table("test_history")
    op.drop_index("ix_test_items_word_id", table_name="test_items")
    op.drop_index("ix_test_items_test_id", table_name="test_items")
    op.drop_table("test_items")
    op.drop_table("tests")
    op.drop_index("ix_words_category_id", table_name="words")
    op.drop_index("ix_words_japanese", table_name="words")
    op.drop_index("ix_words_english", table_name="words")
    op.drop_table("words")
    op.drop_table("categories")

    bind = op.get_bind()
    question_type_enum.drop(bind, checkfirst=True)
    test_type_enum.drop(bind, checkfirst=True)
