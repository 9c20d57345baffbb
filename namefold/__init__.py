"""namefold package.

Rewrites file and directory names to a safe ASCII subset. Convenience exports
are resolved lazily so that importing the package stays cheap.
"""

__version__ = "0.4.0"

__all__: list[str] = [
    "sanitize",
    "sanitize_name",
    "clean_path",
    "walk",
    "run",
    "NameFolder",
    "FoldOptions",
]


def __getattr__(name: str):
    if name in ("sanitize", "sanitize_name"):
        from .sanitizer import sanitize, sanitize_name

        return {"sanitize": sanitize, "sanitize_name": sanitize_name}[name]
    if name == "clean_path":
        from .engine import clean_path

        return clean_path
    if name == "walk":
        from .walker import walk

        return walk
    if name in ("run", "NameFolder", "FoldOptions"):
        from .runner import FoldOptions, NameFolder, run

        return {"run": run, "NameFolder": NameFolder, "FoldOptions": FoldOptions}[name]
    raise AttributeError(f"module 'namefold' has no attribute {name!r}")
