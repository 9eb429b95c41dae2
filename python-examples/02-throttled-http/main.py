"""
Fetch several URLs with at most three requests in flight.

Run:
    python main.py https://example.com https://example.org ...
"""

import asyncio
import logging
import sys

import httpx
from dotenv import load_dotenv

from asyncqueue import AsyncQueue, ThrottledClient

load_dotenv()


async def main(urls: list[str]):
    queue = AsyncQueue.from_env(concurrency=3)

    async with ThrottledClient(queue, timeout=httpx.Timeout(10.0, connect=5.0)) as api:
        results = await asyncio.gather(*(api.get(url) for url in urls), return_exceptions=True)

    for url, result in zip(urls, results):
        if isinstance(result, Exception):
            print(f"{url}: error: {result}")
        else:
            print(f"{url}: {result.status_code} ({len(result.content)} bytes)")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    urls = sys.argv[1:] or ["https://example.com"]
    asyncio.run(main(urls))
