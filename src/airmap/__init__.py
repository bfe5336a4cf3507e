"""Aeronautical map data: feature store, search, access rules and the map surface."""
