"""
Live Verifier
Checks previously collected games against the live-betting page.

Each game ends up in exactly one status:
    found on page          -> live
    missing, not started   -> scheduled
    missing, >= drop min   -> dropped
    missing, >= delay min  -> delayed
    missing, otherwise     -> not_found
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from bs4 import BeautifulSoup
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from . import browser, config
from .config import VerifierConfig
from .errors import EmptyGameListError, LivePageNotLoadedError, NavigationError
from .models import Game, GameResult, GameStatus
from .reports import parse_games, save_results
from .timeutils import CLOCK_TEXT, convert_time, minutes_since, site_now, utc_timestamp

logger = logging.getLogger(__name__)

LIVE_EVENTS_READY = ".inPlayEvents_competition, .eventRow"
LIVE_EVENTS_CONTAINER = ".inPlayEvents"
EVENT_ROW = ".eventRow"
ROW_HOME = ".eventRow_home"
ROW_AWAY = ".eventRow_away"
LIVE_INDICATOR = ".eventRowTime_live, .eventRowTime_liveIndicator, .live"
TIMER = '[data-test="timer"]'
TIME_TEXT = '.eventRowTime_text, [data-test="timer"]'
ROW_PRICE = ".marketBetItem_price"


@dataclass
class LiveCheck:
    confirmed: bool
    reason: str
    time_text: Optional[str] = None
    first_price: Optional[str] = None


@dataclass
class VerificationRun:
    results: List[GameResult] = field(default_factory=list)
    games: List[Game] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def classify_status(scheduled_time: str, now: datetime, found: bool,
                    cfg: VerifierConfig = VerifierConfig()) -> Tuple[GameStatus, Optional[int]]:
    """
    Status for one game given whether it was found on the live page.
    Returns (status, delay_minutes); delay is None when found, not yet due or unparseable.
    """
    if found:
        return GameStatus.LIVE, None

    delay = minutes_since(scheduled_time, now)
    if delay is None:
        return GameStatus.NOT_FOUND, None
    if delay < 0:
        return GameStatus.SCHEDULED, delay
    # drop is checked before delay
    if delay >= cfg.drop_threshold_min:
        return GameStatus.DROPPED, delay
    if delay >= cfg.delay_threshold_min:
        return GameStatus.DELAYED, delay
    return GameStatus.NOT_FOUND, delay


def _has_text(node, text: str) -> bool:
    if node is None:
        return False
    haystack = " ".join(node.get_text(" ").split()).casefold()
    return " ".join(text.split()).casefold() in haystack


def find_event_row(soup: BeautifulSoup, home_team: str, away_team: str):
    """First event row whose home and away cells contain the team names."""
    for row in soup.select(EVENT_ROW):
        if _has_text(row.select_one(ROW_HOME), home_team) and _has_text(row.select_one(ROW_AWAY), away_team):
            return row
    return None


def check_live(row) -> LiveCheck:
    price = row.select_one(ROW_PRICE)
    first_price = price.get_text(strip=True) if price else None

    if row.select_one(LIVE_INDICATOR) is not None:
        return LiveCheck(True, "live indicator", first_price=first_price)

    if row.select_one(TIMER) is not None:
        return LiveCheck(True, "timer", first_price=first_price)

    time_node = row.select_one(TIME_TEXT)
    time_text = time_node.get_text(strip=True) if time_node else None
    if time_text and CLOCK_TEXT.match(time_text):
        return LiveCheck(True, "time format", time_text=time_text, first_price=first_price)

    return LiveCheck(False, "no live marker", time_text=time_text, first_price=first_price)


def evaluate_game(game: Game, soup: BeautifulSoup, now: datetime,
                  cfg: VerifierConfig = VerifierConfig()) -> Tuple[Game, GameResult, Optional[str]]:
    """
    Check one game against a snapshot of the live page.
    Returns the updated game, its result record and a failure message (or None).
    """
    timestamp = utc_timestamp(now, cfg.source_utc_offset)
    row = find_event_row(soup, game.home_team.strip(), game.away_team.strip())
    status, delay = classify_status(game.scheduled_time, now, row is not None, cfg)

    updated = game.model_copy(update={"status": status, "last_updated": timestamp})
    result = GameResult(
        home_team=game.home_team,
        away_team=game.away_team,
        scheduled_time=game.scheduled_time,
        status=status,
        delay_minutes=delay if delay is not None and delay >= 0 else None,
        last_updated=timestamp,
    )

    if row is None:
        if status == GameStatus.SCHEDULED:
            logger.info(f"Game is scheduled to start in {-delay} minutes")
        elif status == GameStatus.DROPPED:
            logger.info(f"Game is {delay} minutes late - marking as DROPPED")
        elif status == GameStatus.DELAYED:
            logger.info(f"Game is {delay} minutes late - marking as DELAYED")
        else:
            logger.info("Game not found on the live page")
        return updated, result, None

    logger.info("Game found on the page, checking status...")
    check = check_live(row)
    if not check.confirmed:
        logger.warning(f"Game {game.label} is not marked as live on the page")
        return updated, result, f"Game {game.label} should be live but is not marked as live"

    logger.info(f"Game {game.label} is live ({check.reason}) as expected")
    if check.time_text:
        logger.info(f"Game time: {check.time_text}")
    if check.first_price:
        logger.info(f"First odds value: {check.first_price}")
    return updated, result, None


def open_live_page(page: Page, url: str = None, cfg: VerifierConfig = VerifierConfig(),
                   screenshot_path=None):
    """
    Load the live-betting page and scroll to pull in lazy-loaded rows.
    Raises LivePageNotLoadedError (after a screenshot) if no events render.
    """
    url = url or config.LIVE_URL
    screenshot_path = screenshot_path or config.LOAD_FAILED_SCREENSHOT

    logger.info(f"Navigating to: {url}")
    if not browser.goto_with_retries(page, url):
        browser.capture_screenshot(page, screenshot_path)
        raise NavigationError(f"Could not open {url}")
    browser.dismiss_modals(page, modal_timeout=10000)

    logger.info("Waiting for live events to load...")
    try:
        page.wait_for_selector(LIVE_EVENTS_READY, timeout=30000)
        logger.info("Live events page loaded successfully")

        logger.info("Scrolling to load more games...")
        for _ in range(cfg.max_scroll_attempts):
            page.locator(LIVE_EVENTS_CONTAINER).first.hover()
            page.mouse.wheel(0, 200)
            page.wait_for_timeout(1000)
        page.wait_for_timeout(2000)
    except PlaywrightError as e:
        logger.error(f"Failed to load live events: {e}")
        browser.capture_screenshot(page, screenshot_path)
        raise LivePageNotLoadedError(str(e)) from e


def verify_games(page: Page, games: List[Game], cfg: VerifierConfig = VerifierConfig(),
                 now: datetime = None) -> VerificationRun:
    """Check every game against the already loaded live page."""
    now = now or site_now(cfg.source_utc_offset)
    run = VerificationRun()

    for game in games:
        logger.info(f"=== Checking game: {game.label} ===")
        page.wait_for_timeout(1000)
        soup = BeautifulSoup(page.content(), "html.parser")

        updated, result, failure = evaluate_game(game, soup, now, cfg)
        run.games.append(updated)
        run.results.append(result)
        if failure:
            run.failures.append(failure)

    return run


def delayed_or_dropped(results: List[GameResult], cfg: VerifierConfig = VerifierConfig()) -> List[GameResult]:
    """Delayed/dropped results with scheduled_time moved to the target UTC offset."""
    shifted = []
    for result in results:
        if result.status not in (GameStatus.DELAYED, GameStatus.DROPPED):
            continue
        new_time = convert_time(result.scheduled_time, cfg.source_utc_offset, cfg.target_utc_offset)
        shifted.append(result.model_copy(update={"scheduled_time": new_time}))
    return shifted


def write_reports(results: List[GameResult], reports_dir=None,
                  cfg: VerifierConfig = VerifierConfig()) -> Tuple[Path, Path]:
    status_path = save_results(results, config.report_path(config.STATUS_REPORT_FILE, reports_dir))
    late = delayed_or_dropped(results, cfg)
    logger.info(f"{len(late)} delayed or dropped games")
    late_path = save_results(late, config.report_path(config.DELAYED_REPORT_FILE, reports_dir))
    return status_path, late_path


def run_verification(page: Page, input_path=None, reports_dir=None,
                     cfg: VerifierConfig = VerifierConfig(), url: str = None,
                     now: datetime = None) -> VerificationRun:
    """Full live check: load games, open the live page, classify, write reports."""
    input_path = input_path or config.report_path(config.GAMES_LIST_FILE, reports_dir)
    games = parse_games(input_path)
    if not games:
        raise EmptyGameListError(f"No games found in the XML file {input_path}")
    logger.info(f"Found {len(games)} games in XML file")

    open_live_page(page, url=url, cfg=cfg)

    run = verify_games(page, games, cfg, now=now or site_now(cfg.source_utc_offset))
    write_reports(run.results, reports_dir, cfg)
    return run
