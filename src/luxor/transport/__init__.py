"""Transport layer -- Luxor GraphQL API access via httpx."""

from luxor.transport.client import Transport
from luxor.transport.graphql import GraphQLTransport

__all__ = ["GraphQLTransport", "Transport"]
