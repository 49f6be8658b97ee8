"""Hierarchical tabular report engine over a relational data store."""
