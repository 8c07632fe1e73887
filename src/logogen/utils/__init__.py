"""Shared utilities for logogen."""
