"""
Route Optimizer Module.

This module provides the location graph, shortest-path search with
traffic-weighted edges and Euclidean fallback, and multi-stop route building
for delivery drivers.
"""

__version__ = '0.1.0'
