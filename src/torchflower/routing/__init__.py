"""Routing — exact-match (method, path) route table.

Routes are registered during setup and the table is frozen before the
app serves its first request.
"""

from torchflower.routing.route import METHODS, Method, Route
from torchflower.routing.router import Router

__all__ = ["METHODS", "Method", "Route", "Router"]
