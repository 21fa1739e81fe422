"""Upcoming ISS passes for the caller's current location."""

from iss_flyover.adapter import FlyoverTimesAPI
from iss_flyover.application.orchestration import next_iss_times_for_my_location

__all__ = ["FlyoverTimesAPI", "next_iss_times_for_my_location"]
