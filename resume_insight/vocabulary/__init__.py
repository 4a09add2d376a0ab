from functools import lru_cache

from .store import Vocabulary, load_vocabulary


@lru_cache(maxsize=1)
def get_default_vocabulary() -> Vocabulary:
    return load_vocabulary()


__all__ = ["Vocabulary", "load_vocabulary", "get_default_vocabulary"]
