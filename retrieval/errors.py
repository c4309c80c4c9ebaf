"""Errors raised at the catalog boundary of the retrieval core."""


class CatalogError(Exception):
    """A catalog query failed."""


class CatalogUnavailableError(CatalogError):
    def __init__(self, source: str, reason: str = "Catalog unavailable"):
        super().__init__(f"{reason}: {source}")
        self.source = source
        self.reason = reason
