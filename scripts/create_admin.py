from __future__ import annotations

import argparse
import secrets
import string
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy.orm import Session  # noqa: E402

from jobly.config import build_sqlalchemy_db_url, settings  # noqa: E402
from jobly.database import SessionLocal, create_tables  # noqa: E402
from jobly.models.user import User  # noqa: E402
from jobly.utils.password_hash import hash_password  # noqa: E402


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        create_tables()


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def ensure_admin(
    db: Session,
    *,
    username: str,
    password: str,
    email: str,
    first_name: str = "Admin",
    last_name: str = "User",
    update_password: bool = False,
) -> tuple[User, bool]:
    """Create ``username`` as an admin, or promote the existing user.

    Returns the user and whether it was newly created.
    """

    user = db.get(User, username)
    created = user is None
    if created:
        user = User(
            username=username,
            password=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=True,
        )
    else:
        user.is_admin = True
        if update_password:
            user.password = hash_password(password)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user, created


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create (or promote) an admin user account.")
    parser.add_argument("--username", required=True, help="Admin username")
    parser.add_argument("--email", required=True, help="Admin user email")
    parser.add_argument("--password", default=None, help="Admin user password (generated if omitted)")
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    parser.add_argument(
        "--update-password",
        action="store_true",
        help="If the user exists, overwrite their password",
    )

    args = parser.parse_args(argv)

    _ensure_tables()

    password = args.password or _generate_password()

    with SessionLocal() as db:
        user, created = ensure_admin(
            db,
            username=args.username,
            password=password,
            email=args.email,
            first_name=args.first_name,
            last_name=args.last_name,
            update_password=args.update_password,
        )

    if created:
        # Print the password so the operator can log in immediately.
        print(f"created admin username={user.username}")
        if args.password is None:
            print(f"generated password: {password}")
    else:
        print(f"promoted existing user username={user.username}")
        if args.update_password:
            print("password updated")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
