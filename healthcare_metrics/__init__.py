"""Parameterized healthcare metrics queries over a relational data source."""

from .catalogue import CATALOGUE, ParameterSpec, QueryDescriptor
from .exceptions import DataSourceError, HealthcareMetricsError, InvalidParameter, UnknownQuery
from .executor import QueryCatalogue, ResultSet

__all__ = [
    "CATALOGUE",
    "DataSourceError",
    "HealthcareMetricsError",
    "InvalidParameter",
    "ParameterSpec",
    "QueryCatalogue",
    "QueryDescriptor",
    "ResultSet",
    "UnknownQuery",
]
