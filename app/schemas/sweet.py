from pydantic import Field
from typing import Optional, List
from datetime import datetime

from app.schemas.common import CamelModel


class SweetCreate(CamelModel):
    """Schema for creating a new sweet - name, category, price and quantity are required"""
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    quantity: int = Field(..., ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None


class SweetUpdate(CamelModel):
    """Schema for updating a sweet - only supplied fields are changed"""
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, allow_inf_nan=False)
    quantity: Optional[int] = None
    description: Optional[str] = None
    image_url: Optional[str] = None


class SweetResponse(CamelModel):
    id: int
    name: str
    category: str
    price: float
    quantity: int
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SweetListResponse(CamelModel):
    sweets: List[SweetResponse]
    count: int


class SearchFilters(CamelModel):
    name: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None


class SweetSearchResponse(SweetListResponse):
    filters: SearchFilters


class SweetMutationResponse(CamelModel):
    message: str
    sweet: SweetResponse


class PurchaseRequest(CamelModel):
    quantity: int = 1


class RestockRequest(CamelModel):
    quantity: Optional[int] = None


class PurchaseResponse(SweetMutationResponse):
    purchased: int
    total_cost: str


class RestockResponse(SweetMutationResponse):
    restocked: int
