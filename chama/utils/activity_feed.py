import logging
from typing import List

from sqlmodel import Session, select

from chama.core.config import ACTIVITY_CAPACITY
from chama.models.activity import Activity
from chama.models.enums import ActivityType

logger = logging.getLogger(__name__)


def append_activity(
    session: Session,
    type_: ActivityType,
    description: str,
    actor_id: str,
    capacity: int = ACTIVITY_CAPACITY,
) -> Activity:
    """Appends an entry to the feed and evicts the oldest ones past capacity.

    Nothing is committed here: the entry lands together with the mutation
    that produced it.
    """
    activity = Activity(type=type_, description=description, actor_id=actor_id)
    session.add(activity)
    session.flush()

    stale = session.exec(
        select(Activity).order_by(Activity.seq.desc()).offset(capacity)
    ).all()
    for old in stale:
        session.delete(old)
    if stale:
        logger.debug("Evicted %d activities past capacity %d", len(stale), capacity)

    return activity


def recent_activities(session: Session, limit: int = 10) -> List[Activity]:
    # Newest first
    return session.exec(
        select(Activity).order_by(Activity.seq.desc()).limit(limit)
    ).all()
