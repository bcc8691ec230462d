#!/usr/bin/env python3
"""
Query the product catalog API from the terminal:
- list products (all / active / future)
- fetch one product by id or slug
- list variants of a product, list product types

Connection settings come from config/product_api.yml and PRODUCT_API_* env vars (.env supported).
Output is JSON in the API's own field naming.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from product_sdk.clients.factory import build_product_client
from product_sdk.errors import ApiError, ValidationError
from product_sdk.utils.config_loader import DEFAULT_CONFIG_PATH, load_client_config

load_dotenv()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the product catalog API")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to product_api.yml")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("products", help="List all products")
    sub.add_parser("active", help="List active products")
    sub.add_parser("future", help="List products available in the future")
    sub.add_parser("types", help="List product types")

    product = sub.add_parser("product", help="Fetch a product by id")
    product.add_argument("product_id")

    slug = sub.add_parser("slug", help="Fetch a product by slug")
    slug.add_argument("slug")

    variants = sub.add_parser("variants", help="List variants of a product")
    variants.add_argument("product_id")
    return parser


async def run_command(args: argparse.Namespace):
    config = load_client_config(args.config)
    async with build_product_client(config) as client:
        if args.command == "products":
            return await client.list_products()
        if args.command == "active":
            return await client.list_active_products()
        if args.command == "future":
            return await client.list_future_products()
        if args.command == "types":
            return await client.list_product_types()
        if args.command == "product":
            return await client.get_product(args.product_id)
        if args.command == "slug":
            return await client.get_product_by_slug(args.slug)
        if args.command == "variants":
            return await client.list_variants(args.product_id)
    raise ValueError(f"Unknown command: {args.command}")


def main() -> int:
    args = build_parser().parse_args()
    setup_logging(args.verbose)

    try:
        result = asyncio.run(run_command(args))
    except ValidationError as e:
        print(f"Validation failed: {e.message}", file=sys.stderr)
        for field, messages in e.errors.items():
            print(f"  {field}: {'; '.join(messages)}", file=sys.stderr)
        return 1
    except ApiError as e:
        status = f" (HTTP {e.status_code})" if e.status_code else ""
        print(f"Product API error{status}: {e.message}", file=sys.stderr)
        return 1

    if isinstance(result, list):
        output = [item.to_dict() for item in result]
    else:
        output = result.to_dict()
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
