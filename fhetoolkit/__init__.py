"""C++ emitter for Boolean circuits and plaintext reference programs for them."""

__version__ = "0.1.0"