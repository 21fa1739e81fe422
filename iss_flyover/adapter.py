"""Facade adapter for simplified API integration."""

from environs import Env

from iss_flyover.application.orchestration import OrchestrationService
from iss_flyover.domain.models.passes import PassWindow
from iss_flyover.infrastructure.api.clients import (
    DEFAULT_FLYOVER_API_URL,
    DEFAULT_GEOIP_API_URL,
    DEFAULT_IP_API_URL,
    DEFAULT_TIMEOUT,
    AsyncFlyoverApiClient,
    AsyncGeoIPApiClient,
    AsyncIPApiClient,
)


class FlyoverTimesAPI:
    """
    Simplified facade for external integration.

    Hides client construction and orchestration behind one awaitable call.
    """

    def __init__(
        self,
        ip_api_client: AsyncIPApiClient,
        geoip_api_client: AsyncGeoIPApiClient,
        flyover_api_client: AsyncFlyoverApiClient,
    ):
        self._orchestrator = OrchestrationService(
            ip_api_client=ip_api_client,
            geoip_api_client=geoip_api_client,
            flyover_api_client=flyover_api_client,
        )

    @classmethod
    def create_from_env(cls, env: Env) -> "FlyoverTimesAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> facade = FlyoverTimesAPI.create_from_env(env)
        """
        timeout = env.float("HTTP_TIMEOUT", DEFAULT_TIMEOUT)

        return cls(
            AsyncIPApiClient(env.str("IP_API_URL", DEFAULT_IP_API_URL), timeout),
            AsyncGeoIPApiClient(env.str("GEOIP_API_URL", DEFAULT_GEOIP_API_URL), timeout),
            AsyncFlyoverApiClient(
                env.str("FLYOVER_API_URL", DEFAULT_FLYOVER_API_URL), timeout
            ),
        )

    async def next_passes(self) -> list[PassWindow]:
        """
        Upcoming ISS passes for the caller's current location.

        Raises:
            APIException: first failure of any lookup step, unchanged
        """
        return await self._orchestrator.process()
