"""Adapters layer - Concrete implementations of the ports.

Each subpackage implements one port:
- graph: map loading and route solving
- rendering: map visualization
"""
