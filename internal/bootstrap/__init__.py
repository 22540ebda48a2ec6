"""Process bootstrap shared by the API server and the pipeline CLI.

This package contains:
- Dependencies: Struct holding all infrastructure clients
- init_dependencies / close_dependencies: Their lifecycle
- ServiceRegistry: Wires use cases into the pipeline
"""

from .type import Dependencies
from .dependencies import init_dependencies, close_dependencies
from .registry import ServiceRegistry

__all__ = [
    "Dependencies",
    "init_dependencies",
    "close_dependencies",
    "ServiceRegistry",
]
