from .validator import validate_wordlist, pretty_summary
from .source import fetch_words, load_words, normalize_words, write_words

__all__ = ["validate_wordlist", "pretty_summary", "fetch_words", "load_words",
           "normalize_words", "write_words"]
