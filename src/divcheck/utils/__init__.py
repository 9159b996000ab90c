"""Shared helpers for the CLI and API layers."""
