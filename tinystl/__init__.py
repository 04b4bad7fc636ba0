"""Container building blocks: a pooled allocator, a mutable string with positional search, a reverse iterator, pairs and queue/stack adapters."""

__version__ = "0.1.0"
__all__ = ["adapters", "alloc", "reverse_iterator", "search", "string", "utility"]