"""Record storage and auth collaborators."""

from contract_gen.config import StorageConfig
from contract_gen.store.auth import StaticAuthProvider
from contract_gen.store.base import AuthProvider, Identity, Storage
from contract_gen.store.json_file import JsonFileStorage
from contract_gen.store.memory import InMemoryStorage


def create_storage(config: StorageConfig) -> Storage:
    """Build the storage backend named in ``config``."""
    if config.backend == "json":
        return JsonFileStorage(config.data_dir)
    return InMemoryStorage()


__all__ = [
    "AuthProvider",
    "Identity",
    "InMemoryStorage",
    "JsonFileStorage",
    "StaticAuthProvider",
    "Storage",
    "create_storage",
]
