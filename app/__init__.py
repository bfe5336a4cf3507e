"""AIRNAV web service."""
