"""
Authentication package: bearer-token dependencies and login routes.
"""
