from .io import read_words, write_words

__all__ = ["read_words", "write_words"]
