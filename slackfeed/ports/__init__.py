"""Port interfaces (Hexagonal Architecture)."""

from slackfeed.ports.outbound import ChatGatewayPort, GatewayError

__all__ = [
    "ChatGatewayPort",
    "GatewayError",
]
