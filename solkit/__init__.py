"""HTTP service for ed25519 keys, message signing and Solana instruction building."""

__version__ = "0.1.0"