import os
from dataclasses import dataclass
from pathlib import Path

SCHEDULE_URL = os.getenv("SCHEDULE_URL", "https://www.novibet.bet.br/en/live-schedule")
LIVE_URL = os.getenv("LIVE_URL", "https://www.novibet.bet.br/en/live-betting")
REPORTS_DIR = Path(os.getenv("REPORTS_DIR", "./xml-reports"))
HEADLESS = os.getenv("HEADLESS", "true").lower() not in ("0", "false", "no")

GAMES_LIST_FILE = "games_list.xml"
STATUS_REPORT_FILE = "game_statuses.xml"
DELAYED_REPORT_FILE = "delayed_or_dropped_games_gmt+2.xml"
LOAD_FAILED_SCREENSHOT = "live-events-load-failed.png"

MAX_GAMES = 10
MAX_SCROLL_ATTEMPTS = 5
DELAY_THRESHOLD_MIN = 1
DROP_THRESHOLD_MIN = 20

SITE_TIMEZONE = "America/Sao_Paulo"  # browser timezone, UTC-3 year round
SOURCE_UTC_OFFSET = -3  # must match SITE_TIMEZONE
TARGET_UTC_OFFSET = 2


@dataclass(frozen=True)
class VerifierConfig:
    max_scroll_attempts: int = MAX_SCROLL_ATTEMPTS
    delay_threshold_min: int = DELAY_THRESHOLD_MIN
    drop_threshold_min: int = DROP_THRESHOLD_MIN
    source_utc_offset: int = SOURCE_UTC_OFFSET
    target_utc_offset: int = TARGET_UTC_OFFSET


def report_path(filename: str, reports_dir: Path = None) -> Path:
    return Path(reports_dir or REPORTS_DIR) / filename
