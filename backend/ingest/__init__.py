"""Data Ingestion Package

Validates deck records handed over by the host application and assembles
them into a Corpus.
"""
from ingest.decks import TaskRecord, DeckRecord, DeckLoadReport, parse_deck, load_decks

__all__ = [
    "TaskRecord", "DeckRecord", "DeckLoadReport",
    "parse_deck", "load_decks",
]
