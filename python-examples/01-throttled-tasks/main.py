"""
Run tasks of increasing duration through a queue with two slots.

A sixth task is submitted while earlier ones are still waiting, to show it
joins the back of the line instead of being dropped.

Run:
    python main.py
"""

import asyncio
import logging

from dotenv import load_dotenv

from asyncqueue import AsyncQueue

load_dotenv()

task_counter = 0


async def test_task(duration: float) -> float:
    global task_counter
    task_id = task_counter
    task_counter += 1
    print(f"Starting task {task_id} (duration {duration}s)")
    await asyncio.sleep(duration)
    print(f"Ending task {task_id}")
    return duration


async def main():
    queue = AsyncQueue.from_env(concurrency=2, busy_delay=0.2)

    print("=" * 60)
    print("Throttled Tasks Demo")
    print("=" * 60)

    futures = [queue.submit(test_task, float(i)) for i in range(5)]

    # Delayed submission while tasks are still pending
    await asyncio.sleep(1.0)
    print(f"Submitting late task ({queue.length} pending, {queue.running} running)")
    futures.append(queue.submit(test_task, 5.0))

    durations = await asyncio.gather(*futures)
    assert len(durations) == 6

    print("All tasks completed")
    for duration in durations:
        print(f"Task duration: {duration}")
    print(queue.stats())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
