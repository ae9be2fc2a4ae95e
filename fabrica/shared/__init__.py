from fabrica.shared.context import SharedContext, build_shared_context, get_shared_instance
from fabrica.shared.database import ConnectionDescriptor, Database
from fabrica.shared.providers import (
    ConnectionProvider,
    EnvConnectionProvider,
    StaticConnectionProvider,
    create_connection_provider,
)

__all__ = [
    "ConnectionDescriptor",
    "ConnectionProvider",
    "Database",
    "EnvConnectionProvider",
    "SharedContext",
    "StaticConnectionProvider",
    "build_shared_context",
    "create_connection_provider",
    "get_shared_instance",
]
