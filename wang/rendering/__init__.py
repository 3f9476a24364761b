"""
Debug rendering of Wang tile layers.
"""
