"""
Contains some useful utility functions to be used in validator units.
"""
from .query_object import checked_param, field_value
