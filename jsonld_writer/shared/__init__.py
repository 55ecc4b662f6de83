"""Shared data models for the JSON-LD writer."""
