import logging
from collections.abc import Mapping


class UpstreamBodyFilter(logging.Filter):
    """
    Keeps upstream response bodies readable in the log.

    Error pages from the IP, geo-IP and flyover services are often multi-line
    HTML. String arguments (and plain messages) are flattened onto one line and
    cut after max_length characters; non-string arguments such as status codes
    are left alone so %-formatting still works.
    """

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def shorten(self, text: str) -> str:
        flat = " ".join(text.split())
        if len(flat) > self.max_length:
            return flat[:self.max_length] + "..."
        return flat

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, Mapping):
            record.args = {
                key: self.shorten(value) if isinstance(value, str) else value
                for key, value in record.args.items()
            }
        elif record.args:
            record.args = tuple(
                self.shorten(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        elif isinstance(record.msg, str):
            record.msg = self.shorten(record.msg)
        return True
