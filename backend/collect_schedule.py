#!/usr/bin/env python
"""
Schedule Collector
Scrapes up to 10 upcoming games from the live-schedule page into games_list.xml
"""

import argparse
import logging
import sys
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()
from schedule_monitor import config
from schedule_monitor.browser import open_page
from schedule_monitor.collector import collect_schedule

# Setup logging
log_dir = Path(__file__).parent
log_file = log_dir / "collect_schedule.log"

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


def main(output_path=None, headless=None):
    output_path = output_path or config.report_path(config.GAMES_LIST_FILE)

    logger.info("=" * 60)
    logger.info("COLLECTING SCHEDULE GAMES")
    logger.info(f"Schedule URL: {config.SCHEDULE_URL}")
    logger.info(f"Output: {output_path}")
    logger.info("=" * 60)

    try:
        with open_page(headless=headless) as page:
            games = collect_schedule(page, output_path)
    except Exception as e:
        logger.error(f"Schedule collection failed: {e}")
        return 1

    for game in games:
        logger.info(f"  {game.label} odds {game.odds.home}/{game.odds.draw}/{game.odds.away}")
    logger.info(f"Games data saved to {output_path}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument('--output', default=None)
    parser.add_argument('--headed', action='store_true')
    args = parser.parse_args()
    sys.exit(main(output_path=args.output, headless=False if args.headed else None))
