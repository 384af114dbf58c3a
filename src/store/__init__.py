"""Merged license store.

This package holds the ID-keyed merge store, the per-schema ingestion
policies, and the final ordering and rendering of merged records.
"""
