"""Custom exceptions for the KeeLoq library."""


class KeeloqError(Exception):
    """Base exception for KeeLoq errors."""


class ConfigError(KeeloqError):
    """Invalid key material or configuration."""


class HopCodeError(KeeloqError):
    """Decrypted hopping code does not belong to the expected encoder."""
