"""Read-only views of a local git repository for declarative configuration hosts."""

from .diagnostics import Diagnostic, Diagnostics
from .provider import ENV_PATH, PROVIDER_TYPE_NAME, GitLocalProvider, new
from .server import ProviderServer, ReadResult
from .values import UNKNOWN

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "ENV_PATH",
    "PROVIDER_TYPE_NAME",
    "GitLocalProvider",
    "new",
    "ProviderServer",
    "ReadResult",
    "UNKNOWN",
    "__version__",
]
