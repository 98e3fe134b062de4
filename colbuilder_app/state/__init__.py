"""
Draft state and column builder module.

Holds the active column kind and draft fields, evaluates drafts into tagged
configuration objects (L, P, R, F) and keeps the accepted column list.
"""
