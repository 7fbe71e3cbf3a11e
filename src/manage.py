"""Storefront user registry management CLI.

Provides commands to initialize the saved registry and inspect its accounts.
Reuses the composition root, so the registry is loaded (or seeded), carts are
repriced and due orders are shipped exactly as they are for the application.

Usage:
    python src/manage.py init                       # Load or seed, then save
    python src/manage.py list-users                 # Print every account
    python src/manage.py find-users Default --type Manager
"""

import argparse
import sys


def init_registry():
    """Initialize the registry and write it back to storage."""
    from storefront.bootstrap import get_user_service

    service = get_user_service()
    service.write_to_file()
    registry = service.registry
    print(f"Saved {len(registry)} users to {registry.resource_name}.")


def list_users():
    """Print every account in registry order."""
    from storefront.bootstrap import get_user_service

    for user in get_user_service().get_users():
        _print_user(user)


def find_users(search_string, account_type, active):
    """Print the accounts matching a username search."""
    from storefront.bootstrap import get_user_service
    from storefront.identity.user import AccountType

    matches = get_user_service().find_users_by_name(search_string, AccountType(account_type), active)
    if not matches:
        print("No matching users.")
    for user in matches:
        _print_user(user)


def _print_user(user):
    status = "active" if user.active else "inactive"
    cart_lines = len(user.cart) if user.cart else 0
    ordered_items = sum(len(order.items) for order in user.past_orders)
    print(
        f"{user.id:>4}  {user.username:<20} {user.email:<30} {user.account_type.value:<14} "
        f"{status:<9} cart={cart_lines} orders={len(user.past_orders)} ordered_items={ordered_items}"
    )


def main():
    from storefront.identity.user import AccountType
    from storefront.utils.logging import configure_logging

    parser = argparse.ArgumentParser(description="Storefront user registry management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Load or seed the user registry and save it")
    subparsers.add_parser("list-users", help="List every user account")

    find_parser = subparsers.add_parser("find-users", help="Search users by username")
    find_parser.add_argument("search", help="Substring to look for in usernames")
    find_parser.add_argument(
        "--type",
        choices=[t.value for t in AccountType],
        default=AccountType.CUSTOMER.value,
        help="Account type to match (default: Customer)",
    )
    find_parser.add_argument("--inactive", action="store_true", help="Match inactive accounts instead")

    args = parser.parse_args()

    configure_logging()

    if args.command == "init":
        init_registry()
    elif args.command == "list-users":
        list_users()
    elif args.command == "find-users":
        find_users(args.search, args.type, not args.inactive)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
