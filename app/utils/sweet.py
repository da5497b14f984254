"""
Catalog accessors for the sweets table.

Each function issues a single-table statement. Mutating helpers commit
on success.
"""
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.models.sweet import Sweet

REQUIRED_FIELDS = ("name", "category", "price", "quantity")
UPDATABLE_FIELDS = REQUIRED_FIELDS + ("description", "image_url")


def _check_non_negative(fields: Dict[str, Any]) -> None:
    price = fields.get("price")
    quantity = fields.get("quantity")
    if price is not None and not math.isfinite(price):
        raise ValidationError("Price must be a finite number")
    if price is not None and price < 0:
        raise ValidationError("Price must be a positive number")
    if quantity is not None and quantity < 0:
        raise ValidationError("Quantity must be a positive number")


def list_sweets(db: Session) -> List[Sweet]:
    return db.query(Sweet).all()


def search_sweets(
    db: Session,
    name: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None
) -> List[Sweet]:
    """
    Filter the catalog. All supplied filters must match; absent ones are ignored.

    Name and category are substring matches using the database's LIKE
    collation. Price bounds are inclusive.
    """
    query = db.query(Sweet)

    if name:
        query = query.filter(Sweet.name.like(f"%{name}%"))
    if category:
        query = query.filter(Sweet.category.like(f"%{category}%"))
    if min_price is not None:
        query = query.filter(Sweet.price >= min_price)
    if max_price is not None:
        query = query.filter(Sweet.price <= max_price)

    return query.all()


def get_sweet_by_id(db: Session, sweet_id: int) -> Optional[Sweet]:
    return db.query(Sweet).filter(Sweet.id == sweet_id).first()


def get_sweet_or_404(db: Session, sweet_id: int) -> Sweet:
    sweet = get_sweet_by_id(db, sweet_id)
    if not sweet:
        raise NotFound("Sweet not found", code="SWEET_NOT_FOUND")
    return sweet


def create_sweet(db: Session, fields: Dict[str, Any]) -> Sweet:
    missing = [field for field in REQUIRED_FIELDS if fields.get(field) in (None, "")]
    if missing:
        raise ValidationError("Name, category, price, and quantity are required")
    _check_non_negative(fields)

    now = datetime.utcnow()
    sweet = Sweet(
        name=fields["name"],
        category=fields["category"],
        price=float(fields["price"]),
        quantity=int(fields["quantity"]),
        description=fields.get("description") or None,
        image_url=fields.get("image_url") or None,
        created_at=now,
        updated_at=now
    )
    db.add(sweet)
    db.commit()
    db.refresh(sweet)
    return sweet


def update_sweet(db: Session, sweet_id: int, fields: Dict[str, Any]) -> Sweet:
    """
    Apply a partial update. Only keys present in ``fields`` are written;
    ``updated_at`` is refreshed even when nothing else changes.
    """
    unknown = set(fields) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

    nulled = [field for field in REQUIRED_FIELDS if field in fields and fields[field] in (None, "")]
    if nulled:
        raise ValidationError(f"{', '.join(nulled)} cannot be empty")
    _check_non_negative(fields)

    sweet = get_sweet_or_404(db, sweet_id)

    for field, value in fields.items():
        setattr(sweet, field, value)
    sweet.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(sweet)
    return sweet


def delete_sweet(db: Session, sweet_id: int) -> None:
    sweet = get_sweet_or_404(db, sweet_id)
    db.delete(sweet)
    db.commit()
