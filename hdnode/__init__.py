"""
hdnode - hierarchical deterministic key derivation (BIP32) for secp256k1

Packages:
    -core: exceptions, formats, network parameters, byte streams and logging
    -cryptography: hash functions and the secp256k1 engine
    -data: base58 codec
    -wallet: the HDNode, master generation, child key derivation, paths and extended key serialization
"""
# hdnode/__init__.py
from hdnode.core import *
from hdnode.wallet import *
