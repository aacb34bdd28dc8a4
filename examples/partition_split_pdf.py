#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from docpart.client import PartitionClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Partition a document, splitting PDFs per page")
    p.add_argument("path", type=Path)
    p.add_argument("--server-url", default="http://localhost:8000")
    p.add_argument("--api-key", default=None)
    p.add_argument("--parallel", type=int, default=5, help="Concurrent page requests (max 15)")
    p.add_argument("--no-split", action="store_true", help="Send the document in one request")
    p.add_argument("--strategy", default="fast")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    async with PartitionClient(
        server_url=args.server_url,
        api_key=args.api_key,
        split_pdf_parallel_limit=args.parallel,
    ) as client:
        result = await client.partition(
            args.path.name,
            args.path.read_bytes(),
            split_pdf_page=not args.no_split,
            strategy=args.strategy,
        )

    elements = result.elements or []
    print(f"status={result.status_code} elements={len(elements)}")
    for element in elements[:10]:
        text = (element.get("text") or "").replace("\n", " ")
        print(f"{element.get('type', '?'):>16} | {text[:80]}")


if __name__ == "__main__":
    asyncio.run(main())
