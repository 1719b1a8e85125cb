from .data import ScoreRecord, WordKey, WordRecord

__all__ = ['ScoreRecord', 'WordKey', 'WordRecord']
