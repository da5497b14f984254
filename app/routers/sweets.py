"""
Sweets router.

Public catalog reads, admin product management, and the purchase/restock
stock adjustments.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.core.security import Identity, get_current_admin, get_current_user
from app.schemas.common import MessageResponse
from app.schemas.sweet import (
    SweetCreate,
    SweetUpdate,
    SweetResponse,
    SweetListResponse,
    SweetSearchResponse,
    SweetMutationResponse,
    PurchaseRequest,
    RestockRequest,
    PurchaseResponse,
    RestockResponse
)
from app.utils import sweet as catalog
from app.utils.inventory import purchase_sweet, restock_sweet
from app.utils.logger import get_logger

router = APIRouter(prefix="/sweets", tags=["Sweets"])
logger = get_logger("sweets")


@router.get("", response_model=SweetListResponse)
def list_sweets(db: Session = Depends(get_db)):
    sweets = catalog.list_sweets(db)
    return {"sweets": sweets, "count": len(sweets)}


@router.get("/search", response_model=SweetSearchResponse)
def search_sweets(
    name: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    db: Session = Depends(get_db)
):
    """
    Search the catalog by name, category and an inclusive price range.

    Filters combine with AND; with none supplied this is the full catalog.
    """
    sweets = catalog.search_sweets(
        db,
        name=name,
        category=category,
        min_price=min_price,
        max_price=max_price
    )
    return {
        "sweets": sweets,
        "count": len(sweets),
        "filters": {
            "name": name,
            "category": category,
            "min_price": min_price,
            "max_price": max_price,
        },
    }


@router.get("/{sweet_id}", response_model=SweetResponse)
def get_sweet(sweet_id: int, db: Session = Depends(get_db)):
    return catalog.get_sweet_or_404(db, sweet_id)


@router.post("", response_model=SweetMutationResponse, status_code=status.HTTP_201_CREATED)
def create_sweet(
    payload: SweetCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_admin)
):
    sweet = catalog.create_sweet(db, payload.model_dump())
    logger.info("User %s created sweet %s (%s)", current_user.user_id, sweet.id, sweet.name)
    return {"message": "Sweet created successfully", "sweet": sweet}


@router.put("/{sweet_id}", response_model=SweetMutationResponse)
def update_sweet(
    sweet_id: int,
    payload: SweetUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_admin)
):
    sweet = catalog.update_sweet(db, sweet_id, payload.model_dump(exclude_unset=True))
    return {"message": "Sweet updated successfully", "sweet": sweet}


@router.delete("/{sweet_id}", response_model=MessageResponse)
def delete_sweet(
    sweet_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_admin)
):
    catalog.delete_sweet(db, sweet_id)
    logger.info("User %s deleted sweet %s", current_user.user_id, sweet_id)
    return {"message": "Sweet deleted successfully"}


@router.post("/{sweet_id}/purchase", response_model=PurchaseResponse)
def purchase(
    sweet_id: int,
    payload: Optional[PurchaseRequest] = None,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
):
    """Buy ``quantity`` units (default 1). Fails without touching stock if too few remain."""
    quantity = payload.quantity if payload else 1
    result = purchase_sweet(db, sweet_id, quantity)
    return {
        "message": "Purchase successful",
        "sweet": result.sweet,
        "purchased": result.purchased,
        "total_cost": result.total_cost,
    }


@router.post("/{sweet_id}/restock", response_model=RestockResponse)
def restock(
    sweet_id: int,
    payload: Optional[RestockRequest] = None,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_admin)
):
    result = restock_sweet(db, sweet_id, payload.quantity if payload else None)
    return {
        "message": "Restock successful",
        "sweet": result.sweet,
        "restocked": result.restocked,
    }
