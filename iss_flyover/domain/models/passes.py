from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any


def _whole_seconds(data: dict[str, Any], field: str) -> int:
    value = data[field]
    # bool is an int subclass, but never a valid timestamp or duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    return value


@dataclass(slots=True, frozen=True)
class PassWindow:
    """
    A single ISS overhead pass.

    risetime is the moment the station rises above the horizon (epoch seconds),
    duration is how long it stays visible (seconds).
    """

    risetime: int
    duration: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PassWindow":
        """Raises KeyError for a missing field and ValueError for a non-integer one."""
        return cls(
            risetime=_whole_seconds(data, "risetime"),
            duration=_whole_seconds(data, "duration"),
        )

    @property
    def rise_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.risetime, tz=timezone.utc)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
