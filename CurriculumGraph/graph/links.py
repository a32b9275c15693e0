from CurriculumGraph.graph.traversal import all_reachable_subject_ids


def contributed_availability(source, target):
    """
    Availability that ``source`` delivers to ``target``.

    Walks the availability scale in order. At each tier only the target's
    requirements on subjects upstream of ``source`` are considered; tiers
    where the target asks nothing of ``source`` are skipped rather than
    counted as met. The walk stops at the first tier the source fails.
    """
    scales = target.scales
    upstream = all_reachable_subject_ids(source)

    contributed = scales.lowest_availability
    for availability in scales.availabilities:
        relevant = [
            (subject_id, status_id)
            for subject_id, status_id in target.requirements_at(availability.id)
            if subject_id in upstream
        ]
        if not relevant:
            continue
        if not all(
            source.satisfies(subject_id, status_id)
            for subject_id, status_id in relevant
        ):
            break
        contributed = availability

    return contributed
