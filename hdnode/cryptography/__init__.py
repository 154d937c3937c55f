"""
Elliptic curve cryptography and hash functions
"""
# cryptography/__init__.py
from hdnode.cryptography.ecc import *
from hdnode.cryptography.ecc_engine import *
from hdnode.cryptography.hash_functions import *
