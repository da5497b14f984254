from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from datetime import datetime
from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)  # hashed
    name = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")  # 'user', 'admin', 'super_admin'
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("role IN ('user', 'admin', 'super_admin')", name="ck_users_role"),
    )
