"""Bibliography store, citation tracking and reference formatting for slide presentations."""
