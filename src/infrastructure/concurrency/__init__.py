"""Concurrency adapters (per-event admission locking)."""

from src.infrastructure.concurrency.admission_lock import InMemoryAdmissionLock

__all__ = ["InMemoryAdmissionLock"]
