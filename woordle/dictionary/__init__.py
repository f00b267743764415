from .gateway import DictionaryGateway
from .wordlist import WordListDictionary
from .wordsapi import WordsApiDictionary
from .acquire import acquire_random_word, DEFAULT_WORD_LENGTH

__all__ = [
    "DictionaryGateway",
    "WordListDictionary",
    "WordsApiDictionary",
    "acquire_random_word",
    "DEFAULT_WORD_LENGTH",
]
