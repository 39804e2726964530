"""Centralized model definitions for the UI components server.

This package contains all Pydantic models organized by domain:
- api/: MCP tool response models
- domain/: Catalog and design token models
- config/: Configuration models
"""
