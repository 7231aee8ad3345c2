from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Branch


class BranchRepository(Protocol):
    def get_by_id(self, branch_id: str) -> Optional[Branch]:
        raise NotImplementedError

    def create(self, branch: Branch) -> None:
        raise NotImplementedError

    def update(self, branch_id: str, updates: dict[str, Any], *, expected: Optional[dict[str, Any]] = None) -> Branch:
        raise NotImplementedError

    def delete(self, branch_id: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Branch]:
        raise NotImplementedError
