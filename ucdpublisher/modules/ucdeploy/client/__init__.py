"""REST clients, one per UrbanCode Deploy resource."""

from .application import ApplicationClient
from .base import UcdRestClient, build_http_client
from .component import ComponentClient
from .interfaces import ApplicationApi, ComponentApi, PropertyApi, VersionApi
from .property import PropertyClient
from .version import VersionClient

__all__ = [
    "ApplicationApi",
    "ApplicationClient",
    "ComponentApi",
    "PropertyApi",
    "VersionApi",
    "ComponentClient",
    "PropertyClient",
    "UcdRestClient",
    "VersionClient",
    "build_http_client",
]
