"""
Stock adjustment for purchases and restocks.

Both operations are a single conditional UPDATE so concurrent requests
cannot act on a stale quantity. A purchase only succeeds when the row
still holds enough stock at the moment the statement runs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import InsufficientStock, NotFound, ValidationError
from app.models.sweet import Sweet
from app.utils.logger import get_logger
from app.utils.sweet import get_sweet_by_id, get_sweet_or_404

logger = get_logger("inventory")

CENTS = Decimal("0.01")
# Enough digits for any finite float price times any stock count
MONEY_PRECISION = 400


@dataclass
class PurchaseResult:
    sweet: Sweet
    purchased: int
    total_cost: str


@dataclass
class RestockResult:
    sweet: Sweet
    restocked: int


def _require_positive(quantity: Optional[int]) -> int:
    if quantity is None or quantity < 1:
        raise ValidationError("Quantity must be at least 1")
    return quantity


def total_cost(price: float, quantity: int) -> str:
    """Price times quantity, rounded half-up to two decimals."""
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        return str((Decimal(str(price)) * quantity).quantize(CENTS, rounding=ROUND_HALF_UP))


def purchase_sweet(db: Session, sweet_id: int, quantity: Optional[int] = 1) -> PurchaseResult:
    quantity = _require_positive(quantity)

    affected = (
        db.query(Sweet)
        .filter(Sweet.id == sweet_id, Sweet.quantity >= quantity)
        .update(
            {
                Sweet.quantity: Sweet.quantity - quantity,
                Sweet.updated_at: datetime.utcnow(),
            },
            synchronize_session=False
        )
    )

    if affected == 0:
        db.rollback()
        sweet = get_sweet_or_404(db, sweet_id)
        logger.info(
            "Purchase rejected for sweet %s: requested %s, available %s",
            sweet_id, quantity, sweet.quantity
        )
        raise InsufficientStock(sweet.quantity)

    price = db.query(Sweet.price).filter(Sweet.id == sweet_id).scalar()
    try:
        cost = total_cost(price, quantity)
    except (InvalidOperation, TypeError):
        db.rollback()
        logger.error("Sweet %s has an unusable price %r; purchase rolled back", sweet_id, price)
        raise ValidationError("Sweet has an invalid price and cannot be purchased")

    db.commit()
    sweet = get_sweet_by_id(db, sweet_id)
    db.refresh(sweet)

    logger.info("Purchased %s x sweet %s, %s left", quantity, sweet_id, sweet.quantity)
    return PurchaseResult(sweet=sweet, purchased=quantity, total_cost=cost)


def restock_sweet(db: Session, sweet_id: int, quantity: Optional[int]) -> RestockResult:
    quantity = _require_positive(quantity)

    affected = (
        db.query(Sweet)
        .filter(Sweet.id == sweet_id)
        .update(
            {
                Sweet.quantity: Sweet.quantity + quantity,
                Sweet.updated_at: datetime.utcnow(),
            },
            synchronize_session=False
        )
    )

    if affected == 0:
        db.rollback()
        raise NotFound("Sweet not found", code="SWEET_NOT_FOUND")

    db.commit()
    sweet = get_sweet_or_404(db, sweet_id)
    db.refresh(sweet)

    logger.info("Restocked sweet %s by %s, now %s", sweet_id, quantity, sweet.quantity)
    return RestockResult(sweet=sweet, restocked=quantity)
