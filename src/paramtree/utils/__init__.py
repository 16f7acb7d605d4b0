"""
Contains some useful utility functions used by params and plugins.
"""
from .query_object import attribute, dig, fetch
