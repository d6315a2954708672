from collections.abc import Iterable

from group_directory.models.group import WhatsappGroup
from group_directory.schemas.group import StatsRead


def compute_stats(groups: Iterable[WhatsappGroup]) -> StatsRead:
    groups = list(groups)
    return StatsRead(
        total_groups=len(groups),
        total_categories=len({group.category for group in groups}),
        total_countries=len({group.country for group in groups}),
    )
