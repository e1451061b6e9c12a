"""Icon selection logic for choosing the best icon from multiple candidates"""

from iconfinder.icons.constants import TARGET_ICON_SIZE
from iconfinder.icons.models import IconCandidate


class IconSelector:
    """Select the best icon by source priority, then by closeness to the target size."""

    def __init__(self, target_size: int = TARGET_ICON_SIZE) -> None:
        self.target_size = target_size

    def rank_icons(self, icons: list[IconCandidate]) -> list[IconCandidate]:
        """Return candidates ordered best first.

        The sort is stable, so candidates that tie on priority and size distance
        keep their discovery order.
        """
        return sorted(
            icons, key=lambda icon: (icon.priority, icon.size_distance(self.target_size))
        )

    def select_best_icon(self, icons: list[IconCandidate]) -> IconCandidate:
        """Return the best candidate. `icons` must not be empty."""
        if not icons:
            raise ValueError("Cannot select an icon from an empty list of candidates")
        return self.rank_icons(icons)[0]
