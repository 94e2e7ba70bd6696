"""Dispatch – dotted-path routing for the fake bridge API."""
from fake_ap.dispatch.catalog import NOT_IMPLEMENTED_METHODS
from fake_ap.dispatch.interceptor import ROOT, ApiPath, Interceptor
from fake_ap.dispatch.table import DispatchTable, Route, RouteKind

__all__ = [
    "ApiPath",
    "DispatchTable",
    "Interceptor",
    "NOT_IMPLEMENTED_METHODS",
    "ROOT",
    "Route",
    "RouteKind",
]
