#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database connection and token settings.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from jobboard.db.mongodb import test_mongo_connection, get_mongo_db
from jobboard.db.mongodb import COLLECTIONS
from jobboard.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOB BOARD - CONNECTION CHECK")
    print("=" * 50)

    # MongoDB
    print("\n[1] Checking MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if test_mongo_connection():
        print("    ✅ MongoDB: CONNECTED")
        db = get_mongo_db()
        for name in COLLECTIONS.values():
            print(f"    {name}: {db[name].estimated_document_count()} documents")
    else:
        print("    ❌ MongoDB: FAILED")

    # Token settings
    print("\n[2] Checking token settings...")
    print(f"    Header: {settings.auth_header_name}")
    print(f"    Lifetime: {settings.jwt_expire_days} days")
    if settings.jwt_secret_key == "change-this-secret":
        print("    ⚠️  JWT_SECRET_KEY is the default, set it before deploying")
    else:
        print("    ✅ JWT secret configured")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
