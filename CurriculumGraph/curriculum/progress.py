from dataclasses import dataclass


@dataclass(frozen=True)
class Progress:
    total: int
    approved: int
    pending: int
    approved_percent: int
    pending_percent: int


def _percent(count, total):
    return round(count * 100 / total) if total else 0


def compute_progress(graph):
    """
    Share of subjects approved, and approved or awaiting the final exam.

    Approved means the last status of the scale, pending the second to last
    or above.
    """
    scales = graph.scales
    approved_rank = len(scales.statuses) - 1
    pending_rank = len(scales.statuses) - 2

    subjects = graph.subject_nodes()
    ranks = [scales.status_rank(node.subject.status) for node in subjects]
    approved = sum(1 for rank in ranks if rank >= approved_rank)
    pending = sum(1 for rank in ranks if rank >= pending_rank)

    return Progress(
        total=len(subjects),
        approved=approved,
        pending=pending,
        approved_percent=_percent(approved, len(subjects)),
        pending_percent=_percent(pending, len(subjects)),
    )
