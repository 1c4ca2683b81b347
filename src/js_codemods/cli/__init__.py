"""
Command line interface for js-codemods.
"""
