from .user import User
from .sweet import Sweet
