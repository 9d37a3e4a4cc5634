"""Messages, a client-backed index reader and a server adapter for reading an indexed execution state."""

__version__ = "0.1.0"
__all__ = ["messages", "index", "server"]