"""Game logic for a tower defence game: waves, towers, enemies, tile maps and saved progress."""

__version__ = "0.1.0"