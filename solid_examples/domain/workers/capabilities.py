"""Narrow worker capabilities. A worker implements only the ones it can honour."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Workable(ABC):

    @abstractmethod
    def work(self) -> str:
        ...


class Sleepable(ABC):

    @abstractmethod
    def sleep(self) -> str:
        ...


class Manageable(ABC):

    @abstractmethod
    def be_managed(self) -> List[str]:
        """Run the worker's own routine and return what it did, in order."""
        ...
