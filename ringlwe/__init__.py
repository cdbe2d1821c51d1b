"""256-bit unsigned integers and Montgomery modular arithmetic for RLWE cryptography."""

__version__ = "0.1.0"
__all__ = ["batch", "formatting", "montgomery", "params", "uint256"]