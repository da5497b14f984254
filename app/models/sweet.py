from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint, Index
from datetime import datetime
from app.database import Base


class Sweet(Base):
    """
    Catalog product.

    Stock is only ever adjusted through single conditional UPDATE statements
    (see app.utils.inventory); the CHECK constraints keep price and quantity
    non-negative even if a caller bypasses that path.
    """
    __tablename__ = "sweets"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    description = Column(String, nullable=True)
    image_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_sweets_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_sweets_quantity_non_negative"),
        Index('idx_sweet_name', 'name'),
        Index('idx_sweet_category', 'category'),
    )
