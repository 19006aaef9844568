from .version import __version__
from .clients.port.client import PortClient

__all__ = [
    "PortClient",
    "__version__",
]
