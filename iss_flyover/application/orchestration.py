"""Orchestration service (chains the three lookups with dependency injection)"""

from typing import Optional

from iss_flyover.domain.interfaces import (
    BaseFlyoverApiClient,
    BaseGeoIPApiClient,
    BaseIPApiClient,
)
from iss_flyover.domain.models.passes import PassWindow
from iss_flyover.infrastructure.api.clients import (
    AsyncFlyoverApiClient,
    AsyncGeoIPApiClient,
    AsyncIPApiClient,
)
from iss_flyover.logging_config import get_logger

logger = get_logger(__name__)


class OrchestrationService:
    """
    Finds upcoming ISS passes for the caller's current location.

    All API clients are injected, so any step can be replaced in tests.
    The service keeps no state between calls.
    """

    def __init__(
        self,
        ip_api_client: BaseIPApiClient,
        geoip_api_client: BaseGeoIPApiClient,
        flyover_api_client: BaseFlyoverApiClient,
    ):
        self.ip_api_client = ip_api_client
        self.geoip_api_client = geoip_api_client
        self.flyover_api_client = flyover_api_client

    async def process(self) -> list[PassWindow]:
        """
        Execute the lookup chain.

        Steps:
        1. Fetch the public IP
        2. Resolve the IP to coordinates
        3. Fetch pass windows for those coordinates

        Each step runs only after the previous one succeeded; the first
        APIException propagates unchanged and nothing partial is returned.

        Returns:
            list[PassWindow]: passes in the order the upstream service sent them
        """
        ip = await self.ip_api_client.fetch_my_ip()
        coordinates = await self.geoip_api_client.fetch_coords_by_ip(ip)
        passes = await self.flyover_api_client.fetch_flyover_times(coordinates)

        logger.info(f"Found {len(passes)} upcoming passes for {coordinates}")
        return passes


async def next_iss_times_for_my_location(
    ip_api_client: Optional[BaseIPApiClient] = None,
    geoip_api_client: Optional[BaseGeoIPApiClient] = None,
    flyover_api_client: Optional[BaseFlyoverApiClient] = None,
) -> list[PassWindow]:
    """Compute the next ISS pass windows for the caller's current location."""
    orchestrator = OrchestrationService(
        ip_api_client=ip_api_client or AsyncIPApiClient(),
        geoip_api_client=geoip_api_client or AsyncGeoIPApiClient(),
        flyover_api_client=flyover_api_client or AsyncFlyoverApiClient(),
    )
    return await orchestrator.process()
