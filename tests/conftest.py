"""Shared pytest configuration."""

pytest_plugins = ["claims_rbac.testing.fixtures"]
