#!/usr/bin/env python3
"""
Print a password hash for the ``ADMIN_PASSWORD_HASH`` setting.

The API seeds its admin account on every start.  Setting
``ADMIN_PASSWORD_HASH`` instead of ``ADMIN_PASSWORD`` keeps the plain
password out of the environment.  The hash format is PBKDF2‑HMAC‑SHA256,
"salthex$hashhex".

Usage:
    python hash_password.py --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from portfolio_api.app.core.security import hash_password, verify_password


def main():
    ap = argparse.ArgumentParser(description="Hash a Portfolio API admin password.")
    ap.add_argument("--password", help="Password to hash. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)
    if not args.password and getpass.getpass("Repeat password: ") != new_password:
        print("[!] Passwords do not match.", file=sys.stderr)
        sys.exit(1)

    hashed = hash_password(new_password)
    if not verify_password(new_password, hashed):
        print("[!] Hash verification failed.", file=sys.stderr)
        sys.exit(2)
    print(f"ADMIN_PASSWORD_HASH={hashed}")


if __name__ == "__main__":
    main()
