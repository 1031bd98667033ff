"""Adds comments to Jira tickets based on GitHub pull requests."""

__version__ = "0.1.0"
