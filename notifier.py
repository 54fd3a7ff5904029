"""MotivateMe headless reminder runner.

Checks the saved schedule every minute and alerts through the desktop
notification, the chime and the log, without the HTTP API.
Run with: python notifier.py
"""

import asyncio

from apscheduler.schedulers.asyncio import AsyncIOScheduler

import config
from domains.audio import SoundDeviceSynthesizer
from domains.reminders import InAppFeed, PlyerNotificationSink, ReminderNotifier
from domains.signals import EventBus, SCHEDULE_NOTIFICATION
from logger import logger


def _log_banner(payload: dict) -> None:
    logger.info(f"Reminder: {payload['title']} ({payload['time']})")


async def run() -> None:
    bus = EventBus()
    feed = InAppFeed()
    feed.attach(bus)
    bus.subscribe(SCHEDULE_NOTIFICATION, _log_banner)

    notifier = ReminderNotifier(
        bus=bus,
        chime=SoundDeviceSynthesizer(),
        notifications=PlyerNotificationSink(),
        toasts=feed,
    )

    scheduler = AsyncIOScheduler()
    notifier.start(scheduler)
    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")

    try:
        await asyncio.Event().wait()
    finally:
        notifier.stop()
        scheduler.shutdown(wait=False)


def main():
    """Entry point."""
    logger.info(f"Starting {config.APP_NAME} reminders...")
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
