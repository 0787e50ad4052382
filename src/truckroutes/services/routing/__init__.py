"""Routing kernel exports."""

from .models import RouteResult, Saving, WorkingRoute
from .solver import rank_results, solve_cvrp
from .two_opt import IMPROVEMENT_TOLERANCE

__all__ = [
    "IMPROVEMENT_TOLERANCE",
    "RouteResult",
    "Saving",
    "WorkingRoute",
    "rank_results",
    "solve_cvrp",
]
