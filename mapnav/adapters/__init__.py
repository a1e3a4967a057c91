"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Route solving (Dijkstra)
- Map rendering (plain text)
"""
