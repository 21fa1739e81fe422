from abc import ABC, abstractmethod

from iss_flyover.domain.models.coordinates import Coordinates
from iss_flyover.domain.models.passes import PassWindow


class BaseApiClient(ABC):
    def __init__(self, api_url: str):
        self.api_url = api_url


class BaseIPApiClient(BaseApiClient):
    @abstractmethod
    async def fetch_my_ip(self) -> str:
        """
        Fetch the caller's public IP address.
        This method must be implemented by subclasses.
        """
        pass


class BaseGeoIPApiClient(BaseApiClient):
    @abstractmethod
    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """
        Resolve an IP address to approximate coordinates.
        This method must be implemented by subclasses.
        """
        pass


class BaseFlyoverApiClient(BaseApiClient):
    @abstractmethod
    async def fetch_flyover_times(self, coordinates: Coordinates) -> list[PassWindow]:
        """
        Fetch upcoming ISS passes over the given coordinates.
        This method must be implemented by subclasses.
        """
        pass
