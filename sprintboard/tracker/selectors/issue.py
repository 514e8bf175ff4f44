# ============================================
# tracker/selectors/issue.py
# ============================================
from typing import Dict, List, Optional, Tuple
from django.db.models import Case, IntegerField, Q, QuerySet, Value, When
from tracker.models import Issue, Sprint, User


def status_rank() -> Case:
    """Sort key following the board's column order, not the alphabet"""
    return Case(
        *[When(status=value, then=Value(rank)) for rank, value in enumerate(Issue.Status.values)],
        output_field=IntegerField(),
    )


class IssueSelector:

    @staticmethod
    def get_issue_by_id(issue_id: int, org_id: str = None) -> Optional[Issue]:
        """Get single issue with related data"""
        queryset = Issue.objects.select_related(
            'project', 'sprint', 'assignee', 'reporter'
        )
        if org_id is not None:
            queryset = queryset.filter(project__organization_id=org_id)
        try:
            return queryset.get(id=issue_id)
        except Issue.DoesNotExist:
            return None

    @staticmethod
    def get_issues_for_sprint(sprint_id: int, org_id: str) -> QuerySet:
        return (
            Issue.objects
            .select_related('assignee', 'reporter')
            .filter(sprint_id=sprint_id, project__organization_id=org_id)
            .annotate(status_rank=status_rank())
            .order_by('status_rank', 'order', 'id')
        )

    @staticmethod
    def get_issues_for_user(user: User, org_id: str) -> QuerySet:
        """Issues assigned to or reported by user, most recently touched first"""
        return (
            Issue.objects
            .select_related('project', 'assignee', 'reporter')
            .filter(Q(assignee=user) | Q(reporter=user), project__organization_id=org_id)
            .order_by('-updated_at')
        )

    @staticmethod
    def get_last_order(project_id: int, status: str) -> Optional[int]:
        last_issue = (
            Issue.objects
            .filter(project_id=project_id, status=status)
            .order_by('-order')
            .only('order')
            .first()
        )
        return last_issue.order if last_issue else None

    @staticmethod
    def get_board_columns(project_id: int, sprint: Optional[Sprint]) -> Dict[str, List[Tuple[int, int]]]:
        """(issue id, order) per status column, in display order"""
        columns: Dict[str, List[Tuple[int, int]]] = {value: [] for value in Issue.Status.values}
        rows = (
            Issue.objects
            .filter(project_id=project_id, sprint=sprint)
            .order_by('order', 'id')
            .values_list('id', 'status', 'order')
        )
        for issue_id, status, order in rows:
            columns[status].append((issue_id, order))
        return columns
