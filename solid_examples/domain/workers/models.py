"""Concrete workers."""
from __future__ import annotations
from typing import Callable, Dict, List

from solid_examples.domain.workers.capabilities import Manageable, Sleepable, Workable


class HumanWorker(Workable, Sleepable, Manageable):
    def work(self) -> str:
        return "Human is working hard..."

    def sleep(self) -> str:
        return "Human is taking a well-deserved rest..."

    def be_managed(self) -> List[str]:
        return [self.work(), self.sleep()]


class AndroidWorker(Workable, Manageable):
    def work(self) -> str:
        return "Android is working efficiently..."

    def be_managed(self) -> List[str]:
        # no sleep for androids
        return [self.work()]


WORKER_KINDS: Dict[str, Callable[[], object]] = {
    "human": HumanWorker,
    "android": AndroidWorker,
}


def build_worker(kind: str) -> object:
    try:
        return WORKER_KINDS[kind.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown worker kind '{kind}'. Must be one of {sorted(WORKER_KINDS)}."
        ) from None
