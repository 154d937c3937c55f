"""
Contains the core elements that are used within hdnode

Core:
    -Provides the reference formats and constants
    -Provides the network parameter tables
    -Provides custom exceptions for the various hdnode elements
    -Provides byte stream helpers and the logger factory
"""
# core/__init__.py
from hdnode.core.byte_stream import *
from hdnode.core.exceptions import *
from hdnode.core.formats import *
from hdnode.core.logging import *
from hdnode.core.network import *
