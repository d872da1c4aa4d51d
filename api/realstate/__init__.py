"""
Real state listings: schemas, persistence, business rules and HTTP routes.
"""
