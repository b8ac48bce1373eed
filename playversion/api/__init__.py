"""
HTTP routes for the version lookup service
"""
