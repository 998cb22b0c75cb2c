"""
CRUD operations for the application.
"""
