"""
BIP32 key trees: the HDNode, master generation, child key derivation, paths and extended key serialization
"""
# wallet/__init__.py
from hdnode.wallet.ckd import *
from hdnode.wallet.derivation import *
from hdnode.wallet.fingerprint import *
from hdnode.wallet.master import *
from hdnode.wallet.node import *
from hdnode.wallet.xkeys import *
