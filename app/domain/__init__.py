"""Domain-level policies and business rules.

Pagination state and route access rules live here, independent from the
HTTP layer and the database that apply them.
"""
