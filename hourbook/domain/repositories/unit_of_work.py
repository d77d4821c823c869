"""
Unit of work interface.
Command use cases commit through it on success and roll back on failure.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass
