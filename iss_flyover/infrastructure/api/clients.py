from typing import Any

from httpx import AsyncBaseTransport, AsyncClient, QueryParams, Response, Timeout, codes

from iss_flyover.domain.models.coordinates import Coordinates
from iss_flyover.domain.models.passes import PassWindow
from iss_flyover.domain.interfaces import (
    BaseFlyoverApiClient,
    BaseGeoIPApiClient,
    BaseIPApiClient,
)
from iss_flyover.domain.exceptions import (
    InvalidResponseError,
    UpstreamLogicalError,
    UpstreamStatusError,
)

from .decorators import wrap_transport_errors
from iss_flyover.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_IP_API_URL = "https://api.ipify.org"
DEFAULT_GEOIP_API_URL = "http://ipwho.is"
DEFAULT_FLYOVER_API_URL = "https://iss-flyover.herokuapp.com/json/"
DEFAULT_TIMEOUT = 10.0


class AsyncHttpClientMixin:
    """Shared httpx plumbing: one short-lived AsyncClient per request."""

    timeout: float
    transport: AsyncBaseTransport | None

    def _configure_http(
        self, timeout: float, transport: AsyncBaseTransport | None
    ) -> None:
        self.timeout = timeout
        # A substitute transport (e.g. httpx.MockTransport) lets tests skip the network
        self.transport = transport

    async def _get(self, url: str, params: QueryParams | None = None) -> Response:
        timeout_config = Timeout(self.timeout, connect=5.0)

        async with AsyncClient(
            timeout=timeout_config, follow_redirects=True, transport=self.transport
        ) as client:
            request = client.build_request("GET", url, params=params)
            logger.info(f"HTTP Request: {request.method} {request.url}")
            response = await client.send(request)
            logger.info(f"HTTP Response: {response.status_code}")
            return response

    @staticmethod
    def _parse_json(response: Response) -> Any:
        # Catches both JSONDecodeError and UnicodeDecodeError
        try:
            return response.json()
        except ValueError:
            raise InvalidResponseError(
                f"Expected JSON but got: {response.text}", body=response.text
            )


class AsyncIPApiClient(AsyncHttpClientMixin, BaseIPApiClient):
    def __init__(
        self,
        api_url: str = DEFAULT_IP_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncBaseTransport | None = None,
    ):
        super().__init__(api_url)
        self._configure_http(timeout, transport)

    @wrap_transport_errors("fetching IP")
    async def fetch_my_ip(self) -> str:
        """Public IP discovery request"""
        response = await self._get(self.api_url, params=QueryParams({"format": "json"}))

        if response.status_code != codes.OK:
            logger.warning(
                "IP lookup failed with status %s: %s", response.status_code, response.text
            )
            raise UpstreamStatusError(
                f"Status Code {response.status_code} when fetching IP: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        data = self._parse_json(response)
        try:
            ip = data["ip"]
        except (KeyError, TypeError):
            raise InvalidResponseError(
                f"No 'ip' field in response: {response.text}", body=response.text
            )
        logger.debug(f"Resolved public IP {ip}")
        return ip


class AsyncGeoIPApiClient(AsyncHttpClientMixin, BaseGeoIPApiClient):
    def __init__(
        self,
        api_url: str = DEFAULT_GEOIP_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncBaseTransport | None = None,
    ):
        super().__init__(api_url)
        self._configure_http(timeout, transport)

    @wrap_transport_errors("fetching coordinates")
    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """
        Geo-IP lookup with the IP embedded in the URL path.

        Only the body-level 'success' flag decides failure here; the HTTP
        status code is not checked.
        """
        response = await self._get(f"{self.api_url.rstrip('/')}/{ip}")
        data = self._parse_json(response)

        if not isinstance(data, dict):
            raise InvalidResponseError(
                f"Unexpected geo-IP response: {response.text}", body=response.text
            )

        success = data.get("success")
        if not success:
            service_message = data.get("message")
            reported_ip = data.get("ip", ip)
            logger.warning(f"Geo-IP lookup for {ip} reported failure: {service_message}")
            raise UpstreamLogicalError(
                f"Success status was {success}. Server message says: "
                f"{service_message} when fetching for IP {reported_ip}",
                service_message=service_message,
                ip=reported_ip,
            )

        try:
            coordinates = Coordinates(
                latitude=float(data["latitude"]), longitude=float(data["longitude"])
            )
        except (KeyError, TypeError, ValueError):
            raise InvalidResponseError(
                f"No usable latitude/longitude in response: {response.text}",
                body=response.text,
            )
        logger.debug(f"IP {ip} resolved to {coordinates}")
        return coordinates


class AsyncFlyoverApiClient(AsyncHttpClientMixin, BaseFlyoverApiClient):
    def __init__(
        self,
        api_url: str = DEFAULT_FLYOVER_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncBaseTransport | None = None,
    ):
        super().__init__(api_url)
        self._configure_http(timeout, transport)

    @wrap_transport_errors("fetching flyover times")
    async def fetch_flyover_times(self, coordinates: Coordinates) -> list[PassWindow]:
        """Pass prediction request with httpx"""
        params = QueryParams(
            {"lat": coordinates.latitude, "lon": coordinates.longitude}
        )
        response = await self._get(self.api_url, params=params)

        if response.status_code != codes.OK:
            logger.warning(
                "Flyover lookup failed with status %s: %s",
                response.status_code,
                response.text,
            )
            raise UpstreamStatusError(
                f"Status Code {response.status_code} when fetching for coords: "
                f"{coordinates.latitude} and {coordinates.longitude}",
                status_code=response.status_code,
                body=response.text,
                coordinates=coordinates,
            )

        data = self._parse_json(response)
        try:
            records = data["response"]
            passes = [PassWindow.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError):
            raise InvalidResponseError(
                f"Malformed flyover response: {response.text}", body=response.text
            )

        logger.info(f"---- Got {len(passes)} passes -----")
        return passes
