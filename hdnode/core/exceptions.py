"""
The custom exceptions used throughout hdnode
"""
__all__ = ["HDNodeError", "ValidationError", "InvalidKeyError", "InvalidSeedLengthError", "InvalidPathSyntaxError",
           "HardenedFromNeuteredError", "NotMasterNodeError", "DeserializationError", "InvalidLengthError",
           "InvalidNetworkError", "InvalidPrivateKeyPaddingError", "DataEncodingError", "ChecksumMismatchError",
           "AlreadyNeuteredError", "IsNeuteredError", "DerivationExhaustedError", "StreamError", "ReadError",
           "ECCError"]


class HDNodeError(Exception):
    """
    Parent class for all hdnode errors
    """
    pass


class ValidationError(HDNodeError, ValueError):
    """
    For malformed construction arguments (lengths, ranges, types)
    """
    pass


class InvalidKeyError(ValidationError):
    """
    For a private key outside [1, n-1] or a public key that is not a point on the curve
    """
    pass


class InvalidSeedLengthError(ValidationError):
    """
    For seeds shorter than 16 bytes or longer than 64 bytes
    """
    pass


class InvalidPathSyntaxError(ValidationError):
    """
    For derivation paths which do not match m/0'/1/2'...
    """
    pass


class HardenedFromNeuteredError(HDNodeError):
    """
    Raised when a hardened child is requested from a public-only node
    """
    pass


class NotMasterNodeError(HDNodeError):
    """
    Raised when an absolute path (m/...) is used on a node which is not a root
    """
    pass


class DeserializationError(HDNodeError):
    """
    Parent class for extended key decoding errors
    """
    pass


class InvalidLengthError(DeserializationError):
    """
    For an extended key payload which is not 78 bytes
    """
    pass


class InvalidNetworkError(DeserializationError):
    """
    For version bytes not known to the active network
    """
    pass


class InvalidPrivateKeyPaddingError(DeserializationError):
    """
    For private key data whose leading byte is not 0x00
    """
    pass


class DataEncodingError(HDNodeError):
    """
    For use in encoding/decoding algorithms
    """
    pass


class ChecksumMismatchError(DataEncodingError):
    """
    For base58check data whose checksum doesn't match the payload
    """
    pass


class AlreadyNeuteredError(HDNodeError):
    """
    Raised when neutering a node which holds no private key
    """
    pass


class IsNeuteredError(HDNodeError):
    """
    Raised when private material is requested from a public-only node
    """
    pass


class DerivationExhaustedError(HDNodeError):
    """
    Raised when a bounded retry loop runs out of attempts
    """
    pass


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class ECCError(Exception):
    """
    For failed curve operations: out of range tweaks, zero scalars and the point at infinity
    """
    pass
