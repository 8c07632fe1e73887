"""
Core modules for logogen.

This package contains the core business logic for:
- Configuration management
- Prompt building
- Response parsing
- Logo generation and refinement
"""
