from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import slugify
from ..common.validators import clean_updates, require_non_empty, require_number
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import Branch
from .repository import BranchRepository

_PROTECTED = ("branchId", "createdAt")


class BranchService:
    def __init__(self, branches: BranchRepository, students: StudentRepository):
        self._branches = branches
        self._students = students

    def list_branches(self) -> Sequence[Branch]:
        return self._branches.list_all()

    def create_branch(
        self,
        *,
        name: Any,
        description: Any = None,
        capacity: Any = None,
        now: Optional[datetime] = None,
    ) -> Branch:
        if not name or not str(name).strip():
            raise ValidationError("Branch name is required")
        name = str(name).strip()
        branch_id = slugify(name)

        if self._branches.get_by_id(branch_id):
            raise ConflictError("Branch already exists")

        branch = Branch(
            branch_id=branch_id,
            name=name,
            description=str(description or ""),
            capacity=int(require_number(capacity or 0, "Capacity", minimum=0)),
            occupied=0,
            created_at=to_iso(now or now_utc()),
        )
        self._branches.create(branch)
        return branch

    def update_branch(self, branch_id: Any, updates: Any) -> Branch:
        branch_id = require_non_empty(branch_id, "Branch ID")
        cleaned = clean_updates(updates, protected=_PROTECTED)
        if "capacity" in cleaned:
            cleaned["capacity"] = int(require_number(cleaned["capacity"], "Capacity", minimum=0))

        if not self._branches.get_by_id(branch_id):
            raise NotFoundError("Branch not found")
        return self._branches.update(branch_id, cleaned)

    def delete_branch(self, branch_id: Any) -> None:
        branch_id = require_non_empty(branch_id, "Branch ID")
        assigned = self._students.list_by_branch(branch_id)
        if assigned:
            raise ValidationError(
                "Cannot delete branch with assigned students",
                extra={"studentsCount": len(assigned)},
            )
        self._branches.delete(branch_id)
