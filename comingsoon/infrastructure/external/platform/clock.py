"""Wall-clock collaborator backed by the host's local time."""

from datetime import datetime

from comingsoon.domain.value_objects import CivilTimestamp


class SystemClock:
    """IClock reading the host's local clock (naive; whatever the host reports)."""

    def now(self) -> CivilTimestamp:
        return CivilTimestamp.from_datetime(datetime.now())
