#!/usr/bin/env python3
"""
boundseries Demo: Periodic Health Sampling

Samples the 1-minute load average into a bounded series configured from
SERIES_* environment variables, then prints the retained window.
"""

import os
import sys
import time
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from boundseries.config import setup_logging
from boundseries.series import BoundedSeriesStore

import logging

setup_logging()
logger = logging.getLogger(__name__)


def sample_load() -> int:
    """1-minute load average scaled to an integer (x100)."""
    return int(os.getloadavg()[0] * 100)


def demo_health_series(samples: int = 5, interval: float = 1.0):
    """Record a handful of samples and report what the store keeps."""
    store = BoundedSeriesStore.from_config()

    logger.info("=" * 60)
    logger.info("Series file: %s", store.path)
    logger.info("Resolution: %ss  Window: %ss  Capacity: %d",
                store.resolution, store.window, store.capacity)
    logger.info("Recovered points: %d", len(store.get()))
    logger.info("=" * 60)

    for _ in range(samples):
        value = sample_load()
        store.add(value)
        logger.info("Sampled %d (buffer=%d)", value, store.size())
        time.sleep(interval)

    for point in store.get():
        logger.info("  %s  %d", time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(point.timestamp)), point.value)


if __name__ == '__main__':
    demo_health_series()
