from .in_memory_record_repository import InMemoryRecordRepository

__all__ = ["InMemoryRecordRepository"]
