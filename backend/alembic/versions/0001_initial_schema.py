"""Create users, animals, catalog, schedule, ledger and delivery tables."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


eatable_category = sa.Enum("FOOD", "DRUG", name="eatablecategory")
JSONB_TYPE = postgresql.JSONB(astext_type=sa.Text()).with_variant(sa.JSON(), "sqlite")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def _soft_delete() -> sa.Column:
    return sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column(
            "role",
            sa.Enum("ADMIN", "MANAGER", "CARETAKER", "VIEWER", name="userrole"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum("INVITED", "ACTIVE", "SUSPENDED", name="userstatus"),
            nullable=False,
        ),
        *_timestamps(),
    )

    op.create_table(
        "animals",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("category_name", sa.String(length=120), nullable=False),
        sa.Column(
            "gender", sa.Enum("MALE", "FEMALE", name="animalgender"), nullable=False
        ),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("genus", sa.String(length=120), nullable=True),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("is_health", sa.Boolean(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _soft_delete(),
        *_timestamps(),
    )

    op.create_table(
        "foods",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("capacity", sa.BigInteger(), nullable=False),
        sa.Column("product_union", sa.String(length=64), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _soft_delete(),
        *_timestamps(),
    )
    op.create_index("ix_foods_name", "foods", ["name"])

    op.create_table(
        "drugs",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=120), nullable=True),
        sa.Column("capacity", sa.BigInteger(), nullable=False),
        sa.Column("product_union", sa.String(length=64), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _soft_delete(),
        *_timestamps(),
    )
    op.create_index("ix_drugs_name", "drugs", ["name"])

    op.create_table(
        "animal_eatable_info",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "animal_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("animals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("eatables_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("category", eatable_category, nullable=False),
        sa.Column("daily", JSONB_TYPE, nullable=False),
        _soft_delete(),
        *_timestamps(),
    )
    op.create_index(
        "ix_animal_eatable_info_animal_id", "animal_eatable_info", ["animal_id"]
    )

    op.create_table(
        "animal_given_eatables",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "animal_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("animals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("eatables_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("category", eatable_category, nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("daily", JSONB_TYPE, nullable=False),
        _soft_delete(),
        *_timestamps(),
    )
    op.create_index(
        "ix_animal_given_eatables_animal_id", "animal_given_eatables", ["animal_id"]
    )

    op.create_table(
        "deliveries",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("product_name", sa.String(length=255), nullable=False),
        sa.Column("category", eatable_category, nullable=False),
        sa.Column("capacity", sa.BigInteger(), nullable=False),
        sa.Column("product_union", sa.String(length=64), nullable=False),
        sa.Column("delivered_on", sa.Date(), nullable=False),
        _soft_delete(),
        *_timestamps(),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("product_union", sa.String(length=64), nullable=False),
        sa.Column("total_capacity", sa.BigInteger(), nullable=False),
        sa.Column("description", sa.Text()),
        _soft_delete(),
        *_timestamps(),
    )
    op.create_index("ix_products_name", "products", ["name"])

    op.create_table(
        "animal_products",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "animal_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("animals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "product_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("capacity", sa.BigInteger(), nullable=False),
        sa.Column("get_time", sa.DateTime(timezone=False), nullable=False),
        _soft_delete(),
        *_timestamps(),
    )
    op.create_index("ix_animal_products_animal_id", "animal_products", ["animal_id"])
    op.create_index(
        "ix_animal_products_product_id", "animal_products", ["product_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_animal_products_product_id", table_name="animal_products")
    op.drop_index("ix_animal_products_animal_id", table_name="animal_products")
    op.drop_table("animal_products")
    op.drop_index("ix_products_name", table_name="products")
    op.drop_table("products")
    op.drop_table("deliveries")
    op.drop_index(
        "ix_animal_given_eatables_animal_id", table_name="animal_given_eatables"
    )
    op.drop_table("animal_given_eatables")
    op.drop_index("ix_animal_eatable_info_animal_id", table_name="animal_eatable_info")
    op.drop_table("animal_eatable_info")
    op.drop_index("ix_drugs_name", table_name="drugs")
    op.drop_table("drugs")
    op.drop_index("ix_foods_name", table_name="foods")
    op.drop_table("foods")
    op.drop_table("animals")
    op.drop_table("users")
    bind = op.get_bind()
    for name in ("eatablecategory", "animalgender", "userstatus", "userrole"):
        sa.Enum(name=name).drop(bind, checkfirst=True)
