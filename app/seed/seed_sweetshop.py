"""
Demo data for local development: staff and customer accounts plus a
starter catalog. Each seeder is a no-op when its table already has rows.
"""
from datetime import datetime
from sqlalchemy.orm import Session

from app.core.security import Role, hash_password
from app.models.user import User
from app.models.sweet import Sweet

ADMIN_PASSWORD = "admin123"
USER_PASSWORD = "user123"

DEMO_USERS = [
    ("superadmin@sweetshop.com", "Super Admin", Role.SUPER_ADMIN),
    ("admin1@sweetshop.com", "Admin One", Role.ADMIN),
    ("admin2@sweetshop.com", "Admin Two", Role.ADMIN),
    ("admin3@sweetshop.com", "Admin Three", Role.ADMIN),
    ("user1@sweetshop.com", "Regular User One", Role.USER),
    ("user2@sweetshop.com", "Regular User Two", Role.USER),
]

DEMO_SWEETS = [
    # name, category, price, quantity, description
    ("Motichoor Ladoo", "Ladoo", 12.0, 40, "Tiny boondi pearls bound with ghee and sugar syrup"),
    ("Besan Ladoo", "Ladoo", 10.0, 35, "Roasted gram flour with cardamom"),
    ("Kaju Katli", "Barfi", 25.0, 20, "Cashew fudge finished with silver leaf"),
    ("Gulab Jamun", "Syrup Sweets", 8.0, 50, "Milk-solid dumplings soaked in rose syrup"),
    ("Rasgulla", "Syrup Sweets", 7.5, 45, "Spongy chenna balls in light syrup"),
    ("Jalebi", "Fried Sweets", 6.0, 60, "Crisp spirals soaked in saffron syrup"),
    ("Mysore Pak", "Barfi", 15.0, 25, None),
    ("Soan Papdi", "Flaky Sweets", 9.0, 30, None),
]


def seed_users(db: Session) -> int:
    if db.query(User).first():
        return 0

    admin_hash = hash_password(ADMIN_PASSWORD)
    user_hash = hash_password(USER_PASSWORD)
    now = datetime.utcnow()

    for email, name, role in DEMO_USERS:
        db.add(User(
            email=email,
            password=user_hash if role is Role.USER else admin_hash,
            name=name,
            role=role.value,
            created_at=now
        ))
    db.commit()
    return len(DEMO_USERS)


def seed_sweets(db: Session) -> int:
    if db.query(Sweet).first():
        return 0

    now = datetime.utcnow()
    for name, category, price, quantity, description in DEMO_SWEETS:
        db.add(Sweet(
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            description=description,
            created_at=now,
            updated_at=now
        ))
    db.commit()
    return len(DEMO_SWEETS)
