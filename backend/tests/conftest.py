from datetime import datetime

import pytest

SCHEDULE_HTML = """
<html><body>
<div class="scheduleView">
  <sb-event-row-flat class="scheduleView_eventItem">
    <div class="eventRowTime_text">in 12 minutes</div>
    <div class="eventRow_home"><span class="u-text-ellipsis"> Flamengo </span></div>
    <div class="eventRow_away"><span class="u-text-ellipsis">Palmeiras</span></div>
    <span class="marketBetItem_price">2.10</span>
    <span class="marketBetItem_price">3.25</span>
    <span class="marketBetItem_price">3.60</span>
  </sb-event-row-flat>
  <sb-event-row-flat class="scheduleView_eventItem">
    <div class="eventRowTime_text">21:30</div>
    <div class="eventRow_home"><span class="u-text-ellipsis">Santos</span></div>
    <div class="eventRow_away"><span class="u-text-ellipsis">Corinthians</span></div>
    <span class="marketBetItem_price">1.95</span>
  </sb-event-row-flat>
  <sb-event-row-flat class="scheduleView_eventItem">
    <div class="eventRow_home"><span class="u-text-ellipsis">Gremio</span></div>
  </sb-event-row-flat>
</div>
</body></html>
"""

LIVE_HTML = """
<html><body>
<div class="inPlayEvents">
  <div class="inPlayEvents_competition">
    <div class="eventRow">
      <div class="eventRowTime"><span class="eventRowTime_live">LIVE</span></div>
      <div class="eventRow_home">Flamengo</div>
      <div class="eventRow_away">Palmeiras</div>
      <span class="marketBetItem_price">1.80</span>
    </div>
    <div class="eventRow">
      <div data-test="timer">12:04</div>
      <div class="eventRow_home">Santos FC</div>
      <div class="eventRow_away">Corinthians</div>
    </div>
    <div class="eventRow">
      <span class="eventRowTime_text">45:00</span>
      <div class="eventRow_home">Bahia</div>
      <div class="eventRow_away">Vitoria</div>
    </div>
    <div class="eventRow">
      <span class="eventRowTime_text">HT</span>
      <div class="eventRow_home">Cruzeiro</div>
      <div class="eventRow_away">Atletico Mineiro</div>
    </div>
  </div>
</div>
</body></html>
"""


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 18, 15, 0, 30)


@pytest.fixture
def schedule_html() -> str:
    return SCHEDULE_HTML


@pytest.fixture
def live_html() -> str:
    return LIVE_HTML

