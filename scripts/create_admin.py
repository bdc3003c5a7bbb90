#!/usr/bin/env python3
"""
Create Admin Script

Admins cannot sign up through the API; create them from the shell.
Usage: python scripts/create_admin.py --username root --email admin@example.com
"""
import argparse
import getpass
import sys
sys.path.insert(0, '.')

from pydantic import ValidationError

from jobboard.core.errors import DuplicateEmail
from jobboard.db.mongodb import get_mongo_db, init_mongo_indexes
from jobboard.services.account_service import create_admin


def main():
    parser = argparse.ArgumentParser(description="Create a job board admin account")
    parser.add_argument("--username", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", help="Prompted for when omitted")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")

    db = get_mongo_db()
    init_mongo_indexes(db)

    try:
        admin = create_admin(db, args.username, args.email, password)
    except ValidationError as e:
        print(f"❌ Invalid admin details: {e}")
        sys.exit(1)
    except DuplicateEmail as e:
        print(f"❌ {e.message}")
        sys.exit(1)

    print(f"✅ Admin created: {admin['email']} ({admin['_id']})")


if __name__ == "__main__":
    main()
