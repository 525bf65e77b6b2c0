"""rp - Rust playground project manager."""

__version__ = "0.1.0"
