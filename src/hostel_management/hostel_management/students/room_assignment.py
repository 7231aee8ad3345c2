from __future__ import annotations

import logging
from typing import Optional

from ..branches.repository import BranchRepository
from ..core.exceptions import ConditionFailedError, ConflictError, NotFoundError, ValidationError
from ..rooms.model import Room
from ..rooms.repository import RoomRepository

logger = logging.getLogger(__name__)

_RACE_MESSAGE = "Room occupancy changed concurrently. Please retry."


class RoomAssignment:
    """Moves students in and out of rooms.

    Room and branch counters are written with a condition on the
    ``occupied`` value that was read, so two requests racing for the last
    bed cannot both win.
    """

    def __init__(self, rooms: RoomRepository, branches: BranchRepository):
        self._rooms = rooms
        self._branches = branches

    def get_room(self, branch: str, room_number: str) -> Room:
        room = self._rooms.get(branch, room_number)
        if not room:
            raise NotFoundError("Room not found")
        return room

    def claim(self, room: Room, student_id: str) -> Room:
        if student_id in room.students:
            return room
        if room.is_full:
            raise ValidationError("Room is full")

        students = [*room.students, student_id]
        try:
            updated = self._rooms.update(
                room.branch,
                room.room_number,
                {"students": students, "occupied": len(students)},
                expected={"occupied": room.occupied},
            )
        except ConditionFailedError:
            raise ConflictError(_RACE_MESSAGE)
        try:
            self._shift_branch(room.branch, +1)
        except ConflictError:
            self._undo_claim(updated, student_id)
            raise
        return updated

    def _undo_claim(self, room: Room, student_id: str) -> None:
        """Give the bed back after the branch counter lost a race."""
        students = [s for s in room.students if s != student_id]
        try:
            self._rooms.update(
                room.branch,
                room.room_number,
                {"students": students, "occupied": len(students)},
                expected={"occupied": room.occupied},
            )
        except ConditionFailedError:
            logger.warning("Could not undo claim of %s-%s by %s", room.branch, room.room_number, student_id)

    def release(self, branch: Optional[str], room_number: Optional[str], student_id: str) -> bool:
        """Remove the student from the room; False when they were not in it."""
        if not branch or not room_number:
            return False
        room = self._rooms.get(branch, room_number)
        if not room or student_id not in room.students:
            return False

        students = [s for s in room.students if s != student_id]
        try:
            self._rooms.update(
                branch,
                room_number,
                {"students": students, "occupied": len(students)},
                expected={"occupied": room.occupied},
            )
        except ConditionFailedError:
            raise ConflictError(_RACE_MESSAGE)
        self._shift_branch(branch, -1)
        return True

    def _shift_branch(self, branch_id: str, delta: int) -> None:
        branch = self._branches.get_by_id(branch_id)
        if not branch:
            # rooms may reference a branch name that has no BRANCH record
            logger.debug("No branch record for %s, occupancy counter skipped", branch_id)
            return
        try:
            self._branches.update(
                branch_id,
                {"occupied": max(0, branch.occupied + delta)},
                expected={"occupied": branch.occupied},
            )
        except ConditionFailedError:
            raise ConflictError(_RACE_MESSAGE)
