"""
CLI command handler implementations.
"""
