"""
Utils module - small pure helpers shared by the services.
"""
