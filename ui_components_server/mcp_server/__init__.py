"""MCP Server for the UI component library.

This module provides a Model Context Protocol (MCP) server that exposes the
component catalog and design tokens scraped from a Storybook documentation
site.
"""
