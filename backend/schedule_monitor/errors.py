class ScheduleMonitorError(Exception):
    """Base error for a failed collection or verification run"""


class LivePageNotLoadedError(ScheduleMonitorError):
    """The live-betting page never rendered any event rows"""


class EmptyGameListError(ScheduleMonitorError):
    """The collected games file had no games to verify"""


class NavigationError(ScheduleMonitorError):
    """A page could not be opened after all navigation retries"""
