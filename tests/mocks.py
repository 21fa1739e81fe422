"""Shared fakes for upstream HTTP services."""

import httpx

IP_URL = "https://ip.example.com/"
GEOIP_URL = "http://geoip.example.com"
FLYOVER_URL = "https://flyover.example.com/json/"

SAMPLE_IP = "162.245.144.188"
SAMPLE_GEOIP_BODY = {"success": True, "latitude": 37.3, "longitude": -122.1}
SAMPLE_FLYOVER_BODY = {"response": [{"risetime": 134564234, "duration": 600}]}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served"""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)


def json_transport(body, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


def text_transport(text: str, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, text=text))


def failing_transport(exc_type: type[httpx.TransportError] = httpx.ConnectError) -> RecordingTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated network failure", request=request)

    return RecordingTransport(handler)
