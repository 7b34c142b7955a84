"""Storefront management CLI.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py create-admin --name Admin --email admin@example.com --password secret1
"""

import argparse
import sys


def setup_database():
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    touched = setup_db(storefront)
    if touched:
        print(f"  Schema ready on: {', '.join(touched)}")
    else:
        print("  No SQL providers configured (set PROTEAN_ENV=production); nothing to create.")
    print("Done.")


def drop_database():
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    touched = drop_db(storefront)
    if touched:
        print(f"  Schema dropped on: {', '.join(touched)}")
    print("Done.")


def create_admin(name, email, password):
    from storefront.domain import storefront
    from storefront.identity.registration import RegisterUser
    from storefront.identity.user import UserRole

    storefront.init()
    with storefront.domain_context():
        result = storefront.process(
            RegisterUser(name=name, email=email, password=password, role=UserRole.ADMIN.value),
            asynchronous=False,
        )
    print(f"Admin created: {result['user_id']}")
    return result["user_id"]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Register an admin account")
    admin_parser.add_argument("--name", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "create-admin":
        create_admin(args.name, args.email, args.password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
