# SPDX-License-Identifier: MIT

from fieldtask.model.task_status import StatusTier

# Rich colors for task cards, keyed by status tier
TIER_COLORS: dict[str, str] = {
    StatusTier.SUCCESS: "green",
    StatusTier.DANGER: "red",
    StatusTier.WARNING: "dark_orange",
    StatusTier.INFO: "blue",
    StatusTier.NEUTRAL: "grey50",
}

# Day selector colors
SELECTED_DAY_COLOR = "bold white on blue"
DAY_WITH_TASKS_COLOR = "bold"
EMPTY_DAY_COLOR = "bright_black"

CLOCK_ENTRY_COLOR = "blue"
PLACEHOLDER_COLOR = "bright_black"


def tier_color(tier: str) -> str:
    return TIER_COLORS.get(tier, TIER_COLORS[StatusTier.NEUTRAL])
