#!/usr/bin/env python3
"""
Admin Password Hash Script

Prompts for the admin password and prints the bcrypt hash to put in
AUTH__ADMIN_PASSWORD_HASH.
"""

import getpass
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from portfolio_cms.services.auth_service import hash_password


def main() -> None:
    password = getpass.getpass("Admin password: ")
    if password != getpass.getpass("Repeat password: "):
        print("Passwords do not match", file=sys.stderr)
        sys.exit(1)
    if not password:
        print("Password must not be empty", file=sys.stderr)
        sys.exit(1)

    print(f"AUTH__ADMIN_PASSWORD_HASH='{hash_password(password)}'")


if __name__ == "__main__":
    main()
