"""Download a KeyForge deck as a single sheet image of all its cards."""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # identifier.py
    "find_id",
    # progress.py
    "Progress",
    "ProgressChannel",
    # resolver.py
    "DeckResolver",
    # fetcher.py
    "ImageFetcher",
    # sheet.py
    "DeckSheet",
    # composer.py
    "compose",
    # pipeline.py
    "download_deck",
]


def __getattr__(name: str):
    """Lazy import for module exports."""
    if name == "find_id":
        from decksheet.identifier import find_id
        return find_id
    elif name in ("Progress", "ProgressChannel"):
        from decksheet import progress
        return getattr(progress, name)
    elif name == "DeckResolver":
        from decksheet.resolver import DeckResolver
        return DeckResolver
    elif name == "ImageFetcher":
        from decksheet.fetcher import ImageFetcher
        return ImageFetcher
    elif name == "DeckSheet":
        from decksheet.sheet import DeckSheet
        return DeckSheet
    elif name == "compose":
        from decksheet.composer import compose
        return compose
    elif name == "download_deck":
        from decksheet.pipeline import download_deck
        return download_deck
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
