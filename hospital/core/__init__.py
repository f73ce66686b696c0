"""
Core utilities shared by every resource module: schema base classes and
HTTP middleware.
"""
