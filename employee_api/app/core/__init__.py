"""
Configuration, database access and logging setup.
"""
