"""
Middlewares HTTP.
"""
