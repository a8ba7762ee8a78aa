"""Health-check payload for the API."""

from compounding import __version__
from compounding.schemas.ping import PingResponse


def get_ping_response(service: str) -> PingResponse:
    """Report liveness together with the running service name and package version."""
    return PingResponse(message="pong", service=service, version=__version__)
