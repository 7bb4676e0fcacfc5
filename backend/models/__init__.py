
from models.deck import Task, Deck, Corpus, CorpusSignature

__all__ = [

    "Task", "Deck", "Corpus", "CorpusSignature",
]
