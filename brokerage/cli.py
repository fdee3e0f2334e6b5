"""
Management commands: create tables, bootstrap admins and seed the team roster.

Usage:
    python -m brokerage.cli init-db
    python -m brokerage.cli create-admin --email admin@example.com --name "Site Admin"
    python -m brokerage.cli seed-team
    python -m brokerage.cli reset-db --confirm
"""

import argparse
import asyncio
import getpass
import logging
import sys
from typing import Optional, Sequence

from brokerage.config import settings
from brokerage.database import AsyncSessionLocal, create_tables, drop_tables
from brokerage.models.admin_user import AdminRole
from brokerage.services.auth import AuthService
from brokerage.services.team import TeamService
from brokerage.utils.exceptions import APIException

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class ManagementCommands:
    """Database bootstrap tasks run outside the web process."""

    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def init_db(self) -> None:
        await create_tables()
        logger.info("Tables are in place")

    async def create_admin(self, email: str, name: str, password: str, role: AdminRole = AdminRole.ADMIN):
        """
        Create a back-office account.

        Raises:
            DuplicateResourceError: If the email is already registered
            ValidationError: If the email or password is invalid
        """
        async with self.session_factory() as session:
            admin = await AuthService(session).create_admin(email, password, name, role)
            logger.info(f"Admin user created: {admin.email} (role: {admin.role.value})")
            return admin

    async def seed_team(self) -> int:
        async with self.session_factory() as session:
            inserted = await TeamService(session).seed_defaults()
        logger.info(f"Team seed complete: {inserted} members inserted")
        return inserted

    async def reset_db(self) -> None:
        """Drop and recreate every table. Development and testing only."""
        if not settings.is_development and not settings.is_testing:
            raise RuntimeError("Database reset is only allowed in development or testing")

        logger.warning("Resetting database - all data will be lost!")
        await drop_tables()
        await create_tables()
        logger.info("Database reset completed")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brokerage", description="Brokerage site management commands")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("--email", default=settings.admin_email, help="Admin email address")
    admin_parser.add_argument("--name", default=settings.admin_name, help="Display name")
    admin_parser.add_argument("--password", help="Password (prompted when omitted)")
    admin_parser.add_argument(
        "--role",
        choices=[role.value for role in AdminRole],
        default=AdminRole.ADMIN.value,
        help="Account role"
    )

    subparsers.add_parser("seed-team", help="Insert the default team when the table is empty")

    reset_parser = subparsers.add_parser("reset-db", help="Drop and recreate tables (development only)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    return parser


def main(argv: Optional[Sequence[str]] = None, commands: Optional[ManagementCommands] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = commands or ManagementCommands()

    try:
        if args.command == "init-db":
            asyncio.run(commands.init_db())

        elif args.command == "create-admin":
            if not args.email:
                print("--email is required (or set ADMIN_EMAIL)", file=sys.stderr)
                return 1
            password = args.password or settings.admin_password or getpass.getpass("Password: ")
            asyncio.run(commands.create_admin(args.email, args.name, password, AdminRole(args.role)))

        elif args.command == "seed-team":
            asyncio.run(commands.seed_team())

        elif args.command == "reset-db":
            if not args.confirm:
                print("Database reset requires --confirm flag", file=sys.stderr)
                return 1
            asyncio.run(commands.reset_db())

    except APIException as e:
        logger.error(f"Command failed: {e.detail}")
        return 1
    except RuntimeError as e:
        logger.error(f"Command failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
