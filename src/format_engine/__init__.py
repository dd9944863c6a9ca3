"""Context-aware inline/block formatting engine for Markdown-like text."""

__all__ = [
    "actions",
    "adapters",
    "context",
    "document",
    "keymaps",
    "runtime",
    "session",
    "styles",
    "toolbar",
]

__version__ = "0.1.0"
