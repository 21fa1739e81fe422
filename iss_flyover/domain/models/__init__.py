# iss_flyover/domain/models/__init__.py
from .coordinates import Coordinates
from .passes import PassWindow

__all__ = [
    "Coordinates",
    "PassWindow",
]
