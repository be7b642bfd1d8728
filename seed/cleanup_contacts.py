#!/usr/bin/env python3
"""
Cleanup script to remove seeded contacts via API endpoints.

Only contacts whose email appears in ``seed/data/contacts.json`` are deleted.

Run:
    python seed/cleanup_contacts.py \
      --api-id <API-ID> \
      --api-key <API-KEY>
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

CONTACTS_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/api/contacts"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup seeded contacts via Contacts API")

    parser.add_argument(
        "--api-id",
        default=None,
        help="API Gateway ID (LocalStack)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Full contacts endpoint URL; overrides --api-id",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )

    args = parser.parse_args()
    if not args.base_url and not args.api_id:
        parser.error("one of --api-id or --base-url is required")

    return args


def seeded_emails() -> set[str]:
    data_file = Path(__file__).parent / "data" / "contacts.json"
    with open(data_file, encoding="utf-8") as f:
        data = cast(dict[str, Any], json.load(f))
    return {item["email"] for item in data.get("contacts", [])}


def cleanup_contacts() -> None:
    try:
        args = parse_args()

        headers: dict[str, str] = {}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        base_url = args.base_url or CONTACTS_API_URL.format(args.api_id)
        emails = seeded_emails()

        logger.info(
            "Starting cleanup process",
            extra={"api_base_url": base_url, "emails": sorted(emails)},
        )

        response = requests.get(base_url, headers=headers, timeout=30)

        if not response.ok:
            logger.error(
                "Failed to list contacts",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        response_json = cast(dict[str, Any], response.json())
        contacts = [
            contact
            for contact in cast(list[dict[str, Any]], response_json.get("data", []))
            if contact.get("email") in emails
        ]

        if not contacts:
            logger.info("No seeded contacts found for cleanup")
            return

        for contact in contacts:
            contact_id = contact["id"]

            delete_resp = requests.delete(
                f"{base_url}/{contact_id}",
                headers=headers,
                timeout=30,
            )

            if delete_resp.ok:
                logger.info("Deleted contact", extra={"contact_id": contact_id})
            else:
                logger.error(
                    "Failed to delete contact",
                    extra={
                        "contact_id": contact_id,
                        "status": delete_resp.status_code,
                        "response": delete_resp.text,
                    },
                )

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_contacts()
