"""
Methods for representing extended key data as text
"""
# data/__init__.py
from hdnode.data.codec import *
