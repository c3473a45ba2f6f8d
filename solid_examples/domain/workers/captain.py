"""Captain: coordinates workers through their capabilities only."""
from __future__ import annotations
from typing import Iterable, List

from solid_examples.core.logger import get_logger
from solid_examples.domain.workers.capabilities import Manageable, Sleepable, Workable

logger = get_logger(__name__)


class Captain:
    """
    Every method returns the activity messages it produced, in order.

    Team methods take a mixed crew and act only on the members that have
    the capability in question; the rest are skipped, never forced.
    """

    def manage(self, worker: Manageable) -> List[str]:
        return worker.be_managed()

    def assign_work(self, worker: Workable) -> List[str]:
        return ["Captain: Assigning work...", worker.work()]

    def schedule_rest(self, worker: Sleepable) -> List[str]:
        return ["Captain: Time for rest...", worker.sleep()]

    def manage_team(self, workers: Iterable[object]) -> List[str]:
        activity: List[str] = []
        for worker in workers:
            if isinstance(worker, Manageable):
                activity.extend(self.manage(worker))
        logger.info("team_managed", messages=len(activity))
        return activity

    def coordinate_work(self, workers: Iterable[object]) -> List[str]:
        activity: List[str] = []
        for worker in workers:
            if isinstance(worker, Workable):
                activity.extend(self.assign_work(worker))
        logger.info("work_coordinated", messages=len(activity))
        return activity

    def rest_team(self, workers: Iterable[object]) -> List[str]:
        activity: List[str] = []
        for worker in workers:
            if isinstance(worker, Sleepable):
                activity.extend(self.schedule_rest(worker))
        logger.info("rest_scheduled", messages=len(activity))
        return activity
