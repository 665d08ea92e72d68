#!/usr/bin/env python
"""
Live Verifier
Checks the games in games_list.xml against the live-betting page and writes
game_statuses.xml plus the GMT+2 delayed/dropped report
"""

import argparse
import logging
import sys
from pathlib import Path
from xml.parsers.expat import ExpatError
from dotenv import load_dotenv
load_dotenv()
from schedule_monitor import config
from schedule_monitor.browser import open_page
from schedule_monitor.config import VerifierConfig
from schedule_monitor.errors import ScheduleMonitorError
from schedule_monitor.verifier import run_verification

# Setup logging
log_dir = Path(__file__).parent
log_file = log_dir / "verify_live.log"

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_file),
        logging.StreamHandler()
    ],
    force=True
)

logger = logging.getLogger(__name__)


def main(reports_dir=None, headless=None):
    cfg = VerifierConfig()

    logger.info("=" * 60)
    logger.info("VERIFYING LIVE EVENTS")
    logger.info(f"Live URL: {config.LIVE_URL}")
    logger.info(f"Delay threshold: {cfg.delay_threshold_min} minutes")
    logger.info(f"Drop threshold: {cfg.drop_threshold_min} minutes")
    logger.info("=" * 60)

    try:
        with open_page(headless=headless) as page:
            run = run_verification(page, reports_dir=reports_dir, cfg=cfg)
    except (ScheduleMonitorError, OSError, ExpatError) as e:
        logger.error(f"Verification aborted: {e}")
        return 1

    counts = {}
    for result in run.results:
        counts[result.status.value] = counts.get(result.status.value, 0) + 1

    logger.info("=" * 60)
    logger.info(f"Checked {len(run.results)} games: {counts}")
    for failure in run.failures:
        logger.error(f"  FAILED: {failure}")
    logger.info("=" * 60)

    return 0 if run.ok else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument('--reports-dir', default=None)
    parser.add_argument('--headed', action='store_true')
    args = parser.parse_args()
    sys.exit(main(reports_dir=args.reports_dir, headless=False if args.headed else None))
