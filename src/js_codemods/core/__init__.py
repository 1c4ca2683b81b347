"""
Core rewrite engine.

Holds the tree wrapper, node classifiers, replacement builders, usage ledger,
symbol table, rewriter passes and the import fixer.
"""
