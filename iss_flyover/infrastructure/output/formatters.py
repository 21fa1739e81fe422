"""Output formatting services for console display."""

import json
from iss_flyover.domain.models.passes import PassWindow


class ConsoleOutputFormatter:
    """Prints upcoming passes to the console"""

    def format_result(self, passes: list[PassWindow]) -> None:
        if not passes:
            print("No upcoming passes reported for your location.")
            return

        for window in passes:
            print(
                f"Next pass at {window.rise_datetime:%a %b %d %Y %H:%M:%S} UTC "
                f"for {window.duration} seconds!"
            )


class JSONOutputFormatter:
    def format_result(self, passes: list[PassWindow]) -> str:
        return json.dumps(
            {"passes": [window.to_dict() for window in passes]}, indent=4
        )
