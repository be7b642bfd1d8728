#!/usr/bin/env python3
"""
Seed script to populate the system via API endpoints.

Contacts with a ``picture`` value are created from JSON; the others are
sent as multipart forms with a generated placeholder PNG.

Run:
    python seed/seed_contacts.py \
      --api-id <API-ID> \
      --api-key <API-KEY>
"""

import argparse
import base64
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")


CONTACTS_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/api/contacts"

# 1x1 transparent PNG
PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed contacts via Contacts API")

    parser.add_argument(
        "--api-id",
        default=None,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
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
    parser.add_argument(
        "--limit",
        type=int,
        default=4,
        help="Number of contacts to seed",
    )

    args = parser.parse_args()
    if not args.base_url and not args.api_id:
        parser.error("one of --api-id or --base-url is required")

    return args


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "contacts.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def create_contact(
    url: str,
    item: dict[str, Any],
    headers: dict[str, str],
) -> requests.Response:
    if item.get("picture"):
        return requests.post(url, headers=headers, json=item, timeout=30)

    file_name = f"{item['contact']}.png"
    return requests.post(
        url,
        headers=headers,
        data={key: item[key] for key in ("name", "contact", "email")},
        files={"picture": (file_name, PLACEHOLDER_PNG, "image/png")},
        timeout=30,
    )


def seed_contacts() -> None:
    try:
        args = parse_args()
        data = load_sample_data()

        headers: dict[str, str] = {}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        contacts_url = args.base_url or CONTACTS_API_URL.format(args.api_id)

        logger.info(
            "Starting seeding process",
            extra={"api_base_url": contacts_url},
        )

        for item in cast(list[dict[str, Any]], data.get("contacts", []))[: args.limit]:
            response = create_contact(contacts_url, item, headers)
            response_json = cast(dict[str, Any], response.json())

            if response.status_code == 201:
                logger.info(
                    "Seeded contact",
                    extra={
                        "contact": item["name"],
                        "contact_id": response_json["data"]["id"],
                        "picture": response_json["data"]["picture"],
                    },
                )
            else:
                logger.error(
                    "Failed to seed contact",
                    extra={
                        "contact": item["name"],
                        "status": response.status_code,
                        "response": response_json,
                    },
                )

        logger.info("Seeding completed")

        list_response = requests.get(contacts_url, headers=headers, timeout=30)

        logger.info(
            "List contacts response",
            extra={
                "status": list_response.status_code,
                "response": list_response.json() if list_response.ok else list_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_contacts()
