"""
Event Analytics Subgraph
Federated GraphQL analytics over supergraph event and guest data
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
