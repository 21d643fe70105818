#!/usr/bin/env python3
"""
Issue a bearer token for the Vocabulary List API.

The token subject becomes the caller identity: lists and words created
with the token record it as their creator.  The token is signed with
``SECRET_KEY``, so run this with the same environment as the server.

Usage:
    python create_token.py --sub alice --days 365
"""

import argparse

from vocabulary_api.app.core.security import create_access_token


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Issue a Vocabulary List API bearer token.")
    ap.add_argument("--sub", required=True, help="Caller identity to embed in the token")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args(argv)

    if args.days <= 0:
        ap.error("--days must be positive")

    print(create_access_token({"sub": args.sub}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
