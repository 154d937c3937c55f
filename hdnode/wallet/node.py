"""
The HDNode class - one node of a BIP32 key tree

A node holds its depth, its parent's fingerprint, its child index, a 32-byte chain code and a private key, a
public key or both. Nodes never change after construction. The one exception is the public key of a private node,
which is computed on first access and cached; the computation is deterministic, so concurrent first readers store
the same value.
"""
import json
from secrets import token_bytes

from hdnode.core import XKEYS, NetworkParams, ValidationError, InvalidKeyError, AlreadyNeuteredError
from hdnode.cryptography import ECCEngine, SECP256K1_ENGINE
from .ckd import PATH, derive_child, derive_path
from .fingerprint import fingerprint, identifier
from .master import RandomSource, master_key_material, random_master_key_material
from .xkeys import serialize_extended_key, encode_extended_key, parse_extended_key, decode_extended_key

__all__ = ["HDNode"]


class HDNode:
    __slots__ = ("_depth", "_parent_fingerprint", "_index", "_chain_code", "_private_key", "_public_key", "_network",
                 "_engine")

    def __init__(self,
                 chain_code: bytes,
                 network: NetworkParams,
                 private_key: bytes | None = None,
                 public_key: bytes | None = None,
                 depth: int = 0,
                 parent_fingerprint: bytes = XKEYS.ZERO_FINGERPRINT,
                 index: int = 0,
                 engine: ECCEngine = SECP256K1_ENGINE,
                 ):
        """
        Args:
            chain_code: 32 bytes
            network: NetworkParams the node belongs to; inherited by children
            private_key: optional 32-byte scalar in [1, n-1]
            public_key: optional 33-byte compressed point. At least one key must be given
            depth: 0 for the root, parent depth + 1 otherwise
            parent_fingerprint: 4 bytes, all zero for the root
            index: 32-bit child number, 0 for the root
            engine: ECCEngine used for key validation, the public key and derivation; inherited by children
        """
        # --- Validation --- #
        if not isinstance(network, NetworkParams):
            raise ValidationError(f"Expected NetworkParams but received: {type(network).__name__}")
        if not isinstance(chain_code, (bytes, bytearray)) or len(chain_code) != XKEYS.CHAIN_LENGTH:
            raise ValidationError(f"Chain code must be {XKEYS.CHAIN_LENGTH} bytes")
        if isinstance(depth, bool) or not isinstance(depth, int) or not 0 <= depth <= XKEYS.MAX_DEPTH:
            raise ValidationError(f"Depth must be in [0, {XKEYS.MAX_DEPTH}]: {depth!r}")
        if not isinstance(parent_fingerprint, (bytes, bytearray)) or len(parent_fingerprint) != XKEYS.FINGERPRINT_BYTES:
            raise ValidationError(f"Parent fingerprint must be {XKEYS.FINGERPRINT_BYTES} bytes")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= XKEYS.MAX_INDEX:
            raise ValidationError(f"Index must be a 32-bit value: {index!r}")
        if depth == 0:
            if parent_fingerprint != XKEYS.ZERO_FINGERPRINT:
                raise ValidationError("Root node must have a zero parent fingerprint")
            if index != 0:
                raise ValidationError("Root node must have index 0")

        if not isinstance(engine, ECCEngine):
            raise ValidationError(f"Expected ECCEngine but received: {type(engine).__name__}")

        # --- Keys --- #
        if private_key is None and public_key is None:
            raise ValidationError("Node requires a private key, a public key or both")
        if private_key is not None and not engine.validate_private_key(private_key):
            raise InvalidKeyError("Private key must be 32 bytes in [1, n-1]")
        if public_key is not None and not engine.validate_public_key(public_key):
            raise InvalidKeyError("Public key must be a 33-byte compressed point on the curve")
        if private_key is not None and public_key is not None:
            if engine.derive_public_key(private_key) != bytes(public_key):
                raise ValidationError("Public key does not belong to the private key")

        self._network = network
        self._engine = engine
        self._depth = depth
        self._parent_fingerprint = bytes(parent_fingerprint)
        self._index = index
        self._chain_code = bytes(chain_code)
        self._private_key = bytes(private_key) if private_key is not None else None
        self._public_key = bytes(public_key) if public_key is not None else None

    # --- CONSTRUCTORS --- #
    @classmethod
    def from_seed(cls, seed: bytes, network: NetworkParams, engine: ECCEngine = SECP256K1_ENGINE) -> "HDNode":
        """Master node for a 16 to 64 byte seed"""
        private_key, chain_code = master_key_material(seed, network, engine)
        return cls(chain_code=chain_code, network=network, private_key=private_key, engine=engine)

    @classmethod
    def from_random_seed(cls, network: NetworkParams, random_source: RandomSource = token_bytes,
                         engine: ECCEngine = SECP256K1_ENGINE) -> "HDNode":
        private_key, chain_code = random_master_key_material(network, random_source, engine)
        return cls(chain_code=chain_code, network=network, private_key=private_key, engine=engine)

    @classmethod
    def from_bytes(cls, byte_stream: bytes, network: NetworkParams, engine: ECCEngine = SECP256K1_ENGINE) -> "HDNode":
        """Node from a 78-byte extended key payload"""
        return cls(**parse_extended_key(byte_stream, network), engine=engine)

    @classmethod
    def from_string(cls, text: str, network: NetworkParams, engine: ECCEngine = SECP256K1_ENGINE) -> "HDNode":
        """Node from a base58check extended key (xprv/xpub for bitcoin)"""
        return cls(**decode_extended_key(text, network), engine=engine)

    # --- OVERRIDES --- #
    def _fields(self) -> tuple:
        return (self._network, self._depth, self._parent_fingerprint, self._index, self._chain_code,
                self._private_key, self.public_key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HDNode):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        kind = "public" if self.is_neutered else "private"
        return (f"{self.__class__.__name__}(network={self._network.name!r}, depth={self._depth}, index={self._index}, "
                f"parent_fingerprint={self._parent_fingerprint.hex()}, {kind})")

    # --- PROPERTIES --- #
    @property
    def network(self) -> NetworkParams:
        return self._network

    @property
    def engine(self) -> ECCEngine:
        return self._engine

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def parent_fingerprint(self) -> bytes:
        return self._parent_fingerprint

    @property
    def index(self) -> int:
        return self._index

    @property
    def chain_code(self) -> bytes:
        return self._chain_code

    @property
    def private_key(self) -> bytes | None:
        return self._private_key

    @property
    def public_key(self) -> bytes:
        if self._public_key is None:
            self._public_key = self._engine.derive_public_key(self._private_key)
        return self._public_key

    @property
    def is_neutered(self) -> bool:
        return self._private_key is None

    @property
    def is_hardened(self) -> bool:
        return self._index >= self._network.hardened_bit

    @property
    def identifier(self) -> bytes:
        return identifier(self.public_key)

    def fingerprint(self) -> bytes:
        return fingerprint(self)

    # --- METHODS --- #
    def neuter(self) -> "HDNode":
        """
        Returns the public-only copy of this node. Neutering twice is a caller error.
        """
        if self.is_neutered:
            raise AlreadyNeuteredError("Node is already neutered")
        return self.__class__(
            chain_code=self._chain_code,
            network=self._network,
            public_key=self.public_key,
            depth=self._depth,
            parent_fingerprint=self._parent_fingerprint,
            index=self._index,
            engine=self._engine,
        )

    def derive_child(self, index: int, hardened: bool = False, engine: ECCEngine | None = None) -> "HDNode":
        return derive_child(self, index, hardened, engine if engine is not None else self._engine)

    def derive_path(self, path: PATH, engine: ECCEngine | None = None) -> "HDNode":
        return derive_path(self, path, engine if engine is not None else self._engine)

    def to_bytes(self, private: bool | None = None) -> bytes:
        """78-byte payload. Defaults to the private form when the node holds a private key"""
        if private is None:
            private = not self.is_neutered
        return serialize_extended_key(self, private)

    def to_xprv(self) -> str:
        return encode_extended_key(self, private=True)

    def to_xpub(self) -> str:
        return encode_extended_key(self, private=False)

    # --- DISPLAY --- #
    def to_dict(self) -> dict:
        xkey_dict = {
            "network": self._network.name,
            "depth": self._depth,
            "parent_fingerprint": self._parent_fingerprint.hex(),
            "index": self._index,
            "hardened": self.is_hardened,
            "chain_code": self._chain_code.hex(),
            "pubkey": self.public_key.hex(),
            "fingerprint": self.fingerprint().hex(),
            "public": self.to_xpub(),
        }
        if not self.is_neutered:
            xkey_dict["private"] = self.to_xprv()
        return xkey_dict

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
