"""Interactive command-line Pokédex backed by PokéAPI, with a caching client."""

__version__ = "0.1.0"

__all__ = ["cache", "client", "commands", "models", "repl"]