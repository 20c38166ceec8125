"""Tables that reference taxonomy rows.

Only the foreign keys read by the delete-time usage checks are mapped here;
the planning and sourcing modules own the remaining columns.
"""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taxonomy_admin.models.base import Base, TimestampMixin, UuidPrimaryKeyMixin


class SeasonSlot(Base, UuidPrimaryKeyMixin, TimestampMixin):
    """Planned assortment slot in a season."""

    __tablename__ = "season_slots"

    product_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("product_types.id"), nullable=False, index=True
    )
    collection_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("collections.id"), nullable=True, index=True
    )
    audience_gender_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("audience_genders.id"), nullable=True, index=True
    )
    audience_age_group_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("audience_age_groups.id"), nullable=True
    )
    selling_window_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("selling_windows.id"), nullable=True
    )
    assortment_tenure_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("assortment_tenures.id"), nullable=True
    )


class SkuConcept(Base, UuidPrimaryKeyMixin, TimestampMixin):
    """Product concept promoted into a season slot."""

    __tablename__ = "sku_concepts"

    season_slot_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("season_slots.id"), nullable=True, index=True
    )
    construction_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("constructions.id"), nullable=True
    )
    material_weight_class_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("material_weight_classes.id"), nullable=True
    )
    fit_block_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("fit_blocks.id"), nullable=True
    )
    use_case_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("use_cases.id"), nullable=True
    )
    goods_class_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("goods_classes.id"), nullable=True
    )
    size_scale_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("size_scales.id"), nullable=True
    )


class FactoryCapability(Base, UuidPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "factory_capabilities"

    subcategory_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("product_subcategories.id"), nullable=False, index=True
    )


class FactoryCosting(Base, UuidPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "factory_costing"

    subcategory_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("product_subcategories.id"), nullable=False, index=True
    )


class FactoryNegotiation(Base, UuidPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "factory_negotiations"

    subcategory_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("product_subcategories.id"), nullable=False, index=True
    )
