import sys

from app.core.config import settings
from app.database import Base, SessionLocal, engine
from app.seed.seed_sweetshop import seed_sweets, seed_users


def main():
    print("WARNING: This script will seed the database with demo users and sweets.")
    print(f"Target Environment: {settings.environment}")
    print(f"Database: {settings.database_url.split('@')[-1]}")

    confirm = input("Are you sure you want to proceed? (yes/no): ")
    if confirm.lower() != "yes":
        print("Aborted.")
        return

    db = SessionLocal()
    try:
        print("Ensuring tables exist...")
        Base.metadata.create_all(bind=engine)
        print(f"Seeded {seed_users(db)} users.")
        print(f"Seeded {seed_sweets(db)} sweets.")
        print("✅ Seeding completed successfully.")
    except Exception as e:
        db.rollback()
        print(f"❌ Seeding failed: {str(e)}")
        sys.exit(1)
    finally:
        db.close()

if __name__ == "__main__":
    main()
