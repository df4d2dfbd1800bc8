"""
Service layer.

Each service encapsulates the store access and business rules for one
collection so that API handlers stay free of SQL.
"""
