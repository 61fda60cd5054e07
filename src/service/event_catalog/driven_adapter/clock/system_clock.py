from datetime import date, datetime
from zoneinfo import ZoneInfo

from src.service.event_catalog.app.interface.i_clock import IClock


class SystemClock(IClock):
    def __init__(self, *, timezone: str) -> None:
        self.zone = ZoneInfo(timezone)

    def today(self) -> date:
        return datetime.now(self.zone).date()
