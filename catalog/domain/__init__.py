"""Catalog records, slug rules and the query predicates shared by every storage backend."""
