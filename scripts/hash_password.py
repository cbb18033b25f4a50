#!/usr/bin/env python3
"""
Print a bcrypt hash for the AUTH_USERS setting.
  python scripts/hash_password.py admin
  -> AUTH_USERS='{"admin": "$2b$12$..."}'
"""

import argparse
import getpass
import json
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from gateway.core.security import hash_password


def main():
    ap = argparse.ArgumentParser(description="Hash a password for the gateway credential store")
    ap.add_argument("username")
    ap.add_argument("--password", help="Read from a prompt when omitted")
    args = ap.parse_args()

    password = args.password or getpass.getpass("Password: ")
    if not password:
        ap.error("password must not be empty")
    print("AUTH_USERS='" + json.dumps({args.username: hash_password(password)}) + "'")


if __name__ == "__main__":
    main()
