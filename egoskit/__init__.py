"""Building blocks of a small teaching operating system: queues, C-style
runtime routines, SHA-256, a moving average, a heap allocator, an
in-memory file server and a line-stripping tool."""

__version__ = "0.1.0"