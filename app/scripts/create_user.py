"""
Create a user (e.g. first admin) without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AuthServiceError, CredentialValidationError
from app.core.logging import configure_logging
from app.services.auth import AuthService
from app.services.users import UserRepository
from app.services.validation import validate_sign_up

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Acquisitions user.")
    parser.add_argument("name", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Email address (must be unique)")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    configure_logging(get_settings())

    try:
        payload = validate_sign_up(
            {
                "name": args.name,
                "email": args.email,
                "password": args.password,
                "role": args.role,
            }
        )
    except CredentialValidationError as e:
        for detail in e.details:
            print(f"{detail['field']}: {detail['message']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = AuthService(UserRepository(db), logger=logger).create_user(payload)
    except AuthServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
