"""Session storage implementations."""

from hybridauth.storages.dynamodb import DynamoDBStorage
from hybridauth.storages.memory import MemoryStorage

__all__ = [
    "DynamoDBStorage",
    "MemoryStorage",
]
