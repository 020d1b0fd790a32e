"""Errors raised by the query catalogue."""


class HealthcareMetricsError(Exception):
    """Base class for query layer errors."""
    pass


class UnknownQuery(HealthcareMetricsError):
    """Raised when a query name is not in the catalogue."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown query: {name!r}")


class InvalidParameter(HealthcareMetricsError):
    """Raised when a supplied parameter set fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid parameter {field!r}: {message}")


class DataSourceError(HealthcareMetricsError):
    """Raised when the underlying data source fails to execute a query."""
    pass
