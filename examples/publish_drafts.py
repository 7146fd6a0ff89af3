#!/usr/bin/env python3
"""Publish Drafts Example

Lists the draft items of one schema and publishes them.

Usage:
    1. Set SQUIDEX_URL, SQUIDEX_APP_NAME, SQUIDEX_CLIENT_ID and
       SQUIDEX_CLIENT_SECRET (or put them in a .env file)
    2. Run: python publish_drafts.py articles
"""

import asyncio
import logging
import sys

from pydantic import BaseModel

from squidex_kit import ContentClient, SquidexEntityBase, load_config
from squidex_kit.exceptions import SquidexError

PAGE_SIZE = 50


class ArticleData(BaseModel):
    title: dict[str, str]


class Article(SquidexEntityBase[ArticleData]):
    pass


async def publish_drafts(schema_name: str) -> int:
    """Publish every draft item of ``schema_name``.

    Returns:
        Number of published items
    """
    config = load_config()
    published = 0

    async with ContentClient.from_config(config, schema_name, Article) as client:
        skip = 0
        while True:
            page = await client.get_many(
                skip=skip, top=PAGE_SIZE, filter="status eq 'Draft'", order_by="created"
            )
            for article in page.items:
                await client.publish(article)
                published += 1
                print(f"Published {article.id}: {article.data.title.get('iv', '')}")

            skip += PAGE_SIZE
            if skip >= page.total or not page.items:
                break

    return published


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) != 2:
        print("Usage: python publish_drafts.py <schema>")
        sys.exit(2)

    try:
        count = asyncio.run(publish_drafts(sys.argv[1]))
    except SquidexError as e:
        print(f"Failed: {e}")
        sys.exit(1)

    print(f"Done: {count} item(s) published")


if __name__ == "__main__":
    main()
