"""Laptop helpdesk assistant: catalog search, recommendations and order intake."""

__version__ = "1.0.0"
