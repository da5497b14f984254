from .common import MessageResponse
from .auth import RegisterRequest, LoginRequest, Token
from .user import UserOut, RoleUpdate, UserDeleteResponse
from .sweet import (
    SweetCreate,
    SweetUpdate,
    SweetResponse,
    SweetListResponse,
    SearchFilters,
    SweetSearchResponse,
    SweetMutationResponse,
    PurchaseRequest,
    RestockRequest,
    PurchaseResponse,
    RestockResponse,
)
