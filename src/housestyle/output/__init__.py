"""Reporters for check results."""
