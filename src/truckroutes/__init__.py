"""Truck route optimizer: single-depot CVRP planning service."""

__version__ = "0.1.0"
