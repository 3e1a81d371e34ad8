"""Remote data service client"""

from .client import RemoteDataService
from .requests import RosterRequestClient

__all__ = ["RemoteDataService", "RosterRequestClient"]
