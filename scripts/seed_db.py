from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.smart_campus.smart_campus.database.bootstrap import ensure_demo_admin


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the demo institution and its admin account.")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--email", default="admin@example.edu")
    parser.add_argument("--password", default="admin123")
    parser.add_argument("--institution", default="Demo Institution")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    user_id = ensure_demo_admin(
        db_config,
        username=args.username,
        email=args.email,
        password=args.password,
        institution_name=args.institution,
    )

    print(
        f"OK: Seeded admin #{user_id} <{args.email}> -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
