"""Client for the external semantic-search service."""

from casebrowser.search.client import SearchError, SemanticSearchClient

__all__ = ["SearchError", "SemanticSearchClient"]
