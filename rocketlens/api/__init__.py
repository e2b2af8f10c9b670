"""
RocketLens HTTP API
"""
