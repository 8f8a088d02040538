"""Grant admin rights to a user, creating the user if needed.

Usage:
  python scripts/create_admin.py --email coach@fitmail.com
  python scripts/create_admin.py --email coach@fitmail.com --password '...' --full-name 'Head Coach'

No API endpoint sets the admin flag; this script is the only way.
"""

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.database import build_engine, build_session_factory, create_tables
from config.logs import configure_logging
from config.settings import load_settings
from schemas.user import UserRegister
from services.user_service import create_user, get_by_email

log = logging.getLogger("create_admin")


def grant_admin(session_factory, email: str, password: str | None = None, full_name: str | None = None):
    db = session_factory()
    try:
        user = get_by_email(db, email)
        if user is None:
            if not password:
                raise SystemExit(f"No user with email {email}; pass --password to create one")
            user = create_user(
                db,
                UserRegister(email=email, password=password, full_name=full_name or email.split("@")[0]),
            )
        user.is_admin = True
        db.add(user)
        db.commit()
        return user.id
    finally:
        db.close()


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--email", required=True)
    ap.add_argument("--password")
    ap.add_argument("--full-name")
    args = ap.parse_args()

    configure_logging("INFO")
    settings = load_settings()
    engine = build_engine(settings)
    create_tables(engine)

    user_id = grant_admin(build_session_factory(engine), args.email, args.password, args.full_name)
    log.info("User id=%s is now an admin", user_id)


if __name__ == "__main__":
    main()
