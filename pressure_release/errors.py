class ValveNetworkError(Exception):
    pass


class GraphError(ValveNetworkError, ValueError):
    """Raised when a valve network can't be built from its records"""


class MissingOriginError(GraphError):
    pass


class ConfigurationError(ValveNetworkError, ValueError):
    """Raised for search parameters there is nothing sensible to compute for"""


class SearchTimeoutError(ValveNetworkError, TimeoutError):
    pass
