import argparse
from pathlib import Path
import sys

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from cms_api.core.config import get_settings
from cms_api.core.errors import ApiError
from cms_api.core.security import TokenIssuer
from cms_api.db.session import Database
from cms_api.repositories.admins import AdminStore
from cms_api.schemas.admins import parse_credentials
from cms_api.services.admins import AdminService


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register the super-admin if none exists yet.")
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    settings = get_settings()
    database = Database.from_settings(settings)
    try:
        with database.session() as db:
            service = AdminService(AdminStore(db), TokenIssuer.from_settings(settings))
            credentials = parse_credentials({"username": args.username, "password": args.password})
            service.bootstrap_super_admin(credentials)
    except ApiError as exc:
        print(f"Super-admin {args.username} not created: {exc.message}", file=sys.stderr)
        return 1
    finally:
        database.dispose()
    print(f"Super-admin {args.username} created.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
