from .base import DataSource
from .commit import CommitDataSource
from .head import HeadDataSource
from .remote import RemoteDataSource
from .remotes import RemotesDataSource

__all__ = [
    "DataSource",
    "CommitDataSource",
    "HeadDataSource",
    "RemoteDataSource",
    "RemotesDataSource",
]
