"""
Schedule Collector
Reads upcoming games and 1X2 odds from the live-schedule page
"""

from collections import Counter
from datetime import datetime
from typing import List
import logging

from bs4 import BeautifulSoup
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from . import browser, config
from .models import PLACEHOLDER, Game, GameStatus, Odds
from .errors import NavigationError
from .reports import save_games
from .timeutils import normalize_time_label, site_now

logger = logging.getLogger(__name__)

SCHEDULE_ROW = "sb-event-row-flat.scheduleView_eventItem"
ROW_TIME = ".eventRowTime_text"
ROW_HOME = ".eventRow_home .u-text-ellipsis"
ROW_AWAY = ".eventRow_away .u-text-ellipsis"
ROW_PRICE = ".marketBetItem_price"

FILTER_TOGGLE = '.floatingContainer_button :text("All matches")'
SPORT_OPTION = '.scheduleFilters_dropdownList :text("{sport}")'


def _text(node) -> str:
    if node is None:
        return PLACEHOLDER
    return node.get_text(" ", strip=True) or PLACEHOLDER


def parse_schedule_row(row, now: datetime) -> Game:
    time_node = row.select_one(ROW_TIME)
    label = time_node.get_text(" ", strip=True) if time_node else None

    prices = row.select(ROW_PRICE)
    odds = Odds(
        home=_text(prices[0]) if len(prices) > 0 else PLACEHOLDER,
        draw=_text(prices[1]) if len(prices) > 1 else PLACEHOLDER,
        away=_text(prices[2]) if len(prices) > 2 else PLACEHOLDER,
    )

    return Game(
        scheduled_time=normalize_time_label(label, now),
        home_team=_text(row.select_one(ROW_HOME)),
        away_team=_text(row.select_one(ROW_AWAY)),
        odds=odds,
        status=GameStatus.SCHEDULED,
    )


def extract_schedule_games(html: str, now: datetime = None, limit: int = config.MAX_GAMES) -> List[Game]:
    """
    Extract up to `limit` games from schedule page HTML.
    Missing fields come back as "N/A", never as errors.
    """
    now = now or site_now(config.SOURCE_UTC_OFFSET)
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(SCHEDULE_ROW)[:limit]

    games = [parse_schedule_row(row, now) for row in rows]

    duplicates = [key for key, count in Counter(g.key for g in games).items() if count > 1]
    for key in duplicates:
        logger.warning(f"Duplicate fixture on schedule page, indistinguishable when verifying: {key}")

    return games


def apply_sport_filter(page: Page, sport: str = "Soccer") -> bool:
    try:
        page.locator(FILTER_TOGGLE).click(timeout=5000)
        page.locator(SPORT_OPTION.format(sport=sport)).click(timeout=5000)
        logger.info(f"Applied '{sport}' filter.")
        return True
    except PlaywrightError as e:
        logger.info(f"Could not apply filters: {e}")
        return False


def collect_schedule(page: Page, output_path=None, url: str = None, now: datetime = None) -> List[Game]:
    """Open the schedule page, scrape games and write games_list.xml."""
    url = url or config.SCHEDULE_URL
    output_path = output_path or config.report_path(config.GAMES_LIST_FILE)

    logger.info(f"Navigating to: {url}")
    if not browser.goto_with_retries(page, url):
        raise NavigationError(f"Could not open {url}")

    browser.dismiss_modals(page, modal_timeout=5000, expect_age_text=True)
    apply_sport_filter(page)

    page.wait_for_selector(SCHEDULE_ROW, timeout=10000)

    now = now or site_now(config.SOURCE_UTC_OFFSET)
    games = extract_schedule_games(page.content(), now=now)
    logger.info(f"Extracted {len(games)} games.")

    save_games(games, output_path)
    return games
