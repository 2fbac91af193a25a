"""Protean Engine runner for the tracking domain.

Only needed when events are processed asynchronously (the production
overlay): the engine drains the outbox into the broker and feeds the custody
log handlers.

Usage:
    python src/server.py
"""

import asyncio

from protean.server.engine import Engine


def _get_domain():
    from tracking.domain import tracking

    tracking.init()
    return tracking


async def run():
    engine = Engine(_get_domain())
    await engine.run()


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
