#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Re-seed roles and branches and restore the super admin account."""

from __future__ import annotations

import argparse
import logging
import sys

from thriftersfind.database import SessionLocal
from thriftersfind.models import User
from thriftersfind.services import seed_service

logger = logging.getLogger("repair_admin_role")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--email",
        action="append",
        dest="emails",
        help="Admin email to look for (repeatable). Defaults to the known admin emails.",
    )
    parser.add_argument(
        "--create",
        action="store_true",
        help="Create the super admin instead of repairing an existing account.",
    )
    parser.add_argument("--name", default="Super Admin", help="Name for --create.")
    parser.add_argument("--password", help="Password for --create.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    args = parse_args(argv)

    if args.create and (not args.emails or not args.password):
        logger.error("--create needs --email and --password")
        return 2

    db = SessionLocal()
    try:
        seed_service.seed_reference_data(db)
        logger.info("Roles and branches re-seeded.")

        if args.create:
            user = seed_service.ensure_super_admin(
                db, args.name, args.emails[0], args.password
            )
            logger.info(f"Super admin ready: {user.email}")
            return 0

        user = seed_service.repair_super_admin(
            db, args.emails or seed_service.KNOWN_ADMIN_EMAILS
        )
        if user is None:
            logger.warning("No matching admin user. Existing users:")
            for existing in db.query(User).order_by(User.email).all():
                logger.warning(f"  {existing.email} ({existing.name}) role={existing.role_name}")
            return 1

        logger.info(f"Successfully restored super admin permissions for {user.email}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
