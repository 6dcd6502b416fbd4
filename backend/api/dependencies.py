"""Shared dependencies for API routes."""

from services.vocabulary import KeywordVocabulary, get_vocabulary as _get_vocabulary


def get_vocabulary() -> KeywordVocabulary:
    return _get_vocabulary()
