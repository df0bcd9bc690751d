"""
Seed the accounts the API cannot create through registration.

Admins cannot self-register, so the first admin comes from here. A demo
organizer and attendee are added too. Safe to run repeatedly: existing
emails are skipped.

Usage:
    python app/scripts/seeds/seed_users.py
"""

import os
import secrets
import string
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.orm import Session  # noqa: E402

from app.auth.models.user import User, UserType  # noqa: E402
from app.core.security import get_password_hash  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402


def generate_secure_password(length: int = 24) -> str:
    alphabet = string.ascii_letters + string.digits + "!@#$%&*"
    return "".join(secrets.choice(alphabet) for _ in range(length))


def seed_user(
    db: Session,
    email: str,
    name: str,
    user_type: UserType,
    password: str | None = None,
) -> tuple[User, str | None]:
    """Create the user unless the email is taken.

    Returns the user and the plain password, or None as the password when the
    account already existed.
    """
    email = email.lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        return existing, None

    password = password or generate_secure_password()
    user = User(
        email=email,
        username=email.split("@")[0],
        name=name,
        hashed_password=get_password_hash(password),
        user_type=user_type,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user, password


def seed_admin_user(db: Session) -> tuple[User, str | None]:
    return seed_user(
        db,
        email=os.environ.get("ADMIN_EMAIL", "admin@eventhub.local"),
        name=os.environ.get("ADMIN_NAME", "Admin"),
        user_type=UserType.ADMIN,
        password=os.environ.get("ADMIN_PASSWORD"),
    )


def seed_demo_users(db: Session) -> list[tuple[User, str | None]]:
    return [
        seed_user(
            db,
            email=os.environ.get("DEMO_ORGANIZER_EMAIL", "organizer@eventhub.local"),
            name="Demo Organizer",
            user_type=UserType.ORGANIZER,
            password=os.environ.get("DEMO_ORGANIZER_PASSWORD"),
        ),
        seed_user(
            db,
            email=os.environ.get("DEMO_ATTENDEE_EMAIL", "attendee@eventhub.local"),
            name="Demo Attendee",
            user_type=UserType.ATTENDEE,
            password=os.environ.get("DEMO_ATTENDEE_PASSWORD"),
        ),
    ]


def _report(user: User, password: str | None) -> None:
    if password is None:
        print(f"  {user.user_type.value} already exists: {user.email}")
    else:
        print(f"✓ {user.user_type.value} created: {user.email}")
        print(f"  Password: {password}")


if __name__ == "__main__":
    print("=" * 80)
    print("Seeding database with initial users...")
    print()
    print("  Tip: Set env vars to control credentials:")
    print("    ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME")
    print("    DEMO_ORGANIZER_EMAIL, DEMO_ORGANIZER_PASSWORD")
    print("    DEMO_ATTENDEE_EMAIL, DEMO_ATTENDEE_PASSWORD")
    print("  If not set, secure random passwords will be generated.")
    print("=" * 80)

    session = SessionLocal()
    try:
        _report(*seed_admin_user(session))
        for seeded in seed_demo_users(session):
            _report(*seeded)
    except Exception as e:
        print(f"✗ Error seeding users: {e}")
        session.rollback()
        sys.exit(1)
    finally:
        session.close()

    print("=" * 80)
    print("Seeding complete!")
    print("=" * 80)
