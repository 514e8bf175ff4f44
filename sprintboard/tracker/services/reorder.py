# ============================================
# tracker/services/reorder.py
# ============================================
"""
Drag-and-drop support for the board.

``plan_move`` is the column arithmetic the board performs when a card is
dropped; ``ReorderService.apply_reorder`` writes the resulting batch. The
apply step trusts the batch: no uniqueness or gap checks, no version checks
(concurrent reorders are last-write-wins per row).
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from django.db import DatabaseError, transaction

from tracker.clients.auth_client import AuthContext
from tracker.exceptions import NotFound, PersistenceFailure
from tracker.models import Issue
from tracker.permissions import require_organization
from tracker.selectors.issue import IssueSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReorderEntry:
    issue_id: int
    status: str
    order: int


def plan_move(
    columns: Dict[str, List[int]],
    issue_id: int,
    to_status: str,
    to_index: int,
    slots: Optional[Dict[str, List[int]]] = None,
    next_order: Optional[int] = None,
) -> List[ReorderEntry]:
    """
    Move ``issue_id`` to position ``to_index`` of column ``to_status``.

    ``columns`` maps status -> issue ids in display order. ``slots`` maps
    status -> the order values those cards hold now; the touched columns are
    rewritten onto the same values, and a column that gains a card takes
    ``next_order`` for the extra slot. Orders held by cards outside the board
    (other sprints, backlog) are therefore never reused. Without ``slots``
    every touched column is renumbered 0..n-1. The input mapping is left
    untouched.
    """
    source_status = next(
        (status for status, ids in columns.items() if issue_id in ids),
        None,
    )
    if source_status is None:
        raise NotFound("Issue not found on board")

    working = {status: list(ids) for status, ids in columns.items()}
    working.setdefault(to_status, [])

    working[source_status].remove(issue_id)
    target = working[to_status]
    index = max(0, min(to_index, len(target)))
    target.insert(index, issue_id)

    def column_slots(status: str) -> List[int]:
        size = len(working[status])
        if slots is None:
            return list(range(size))
        taken = sorted(slots.get(status, []))[:size]
        if len(taken) < size:
            if next_order is not None:
                taken.append(next_order)
            else:
                taken.append(taken[-1] + 1 if taken else 0)
        return taken

    affected = [source_status] if source_status == to_status else [source_status, to_status]
    batch = []
    for status in affected:
        for order, iid in zip(column_slots(status), working[status]):
            batch.append(ReorderEntry(issue_id=iid, status=status, order=order))
    return batch


class ReorderService:

    @staticmethod
    def apply_reorder(*, ctx: AuthContext, batch: Iterable[ReorderEntry]) -> Dict[str, bool]:
        """Write status/order for every entry; all rows commit or none do"""
        require_organization(ctx)
        batch = list(batch)

        try:
            with transaction.atomic():
                for entry in batch:
                    updated = Issue.objects.filter(
                        id=entry.issue_id,
                        project__organization_id=ctx.org_id,
                    ).update(status=entry.status, order=entry.order)
                    if not updated:
                        raise NotFound(f"Issue {entry.issue_id} not found")
        except DatabaseError as e:
            raise PersistenceFailure(f"Error reordering issues: {e}") from e

        logger.info("[reorder] applied %s entries org=%s", len(batch), ctx.org_id)
        return {'success': True}

    @staticmethod
    def move_issue(
        *,
        ctx: AuthContext,
        issue_id: int,
        status: str,
        index: int
    ) -> List[ReorderEntry]:
        """Server-side drop: plan against the issue's board, then apply"""
        require_organization(ctx)

        issue = IssueSelector.get_issue_by_id(issue_id, org_id=ctx.org_id)
        if issue is None:
            raise NotFound("Issue not found")

        board = IssueSelector.get_board_columns(issue.project_id, issue.sprint)
        columns = {column: [iid for iid, _ in cards] for column, cards in board.items()}
        slots = {column: [order for _, order in cards] for column, cards in board.items()}

        next_order = None
        if issue.status != status:
            last_order = IssueSelector.get_last_order(issue.project_id, status)
            next_order = last_order + 1 if last_order is not None else 0

        batch = plan_move(columns, issue.id, status, index, slots=slots, next_order=next_order)
        ReorderService.apply_reorder(ctx=ctx, batch=batch)
        return batch
