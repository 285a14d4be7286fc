# SPDX-License-Identifier: MIT

from typing import TypeAlias

# Canonical YYYY-MM-DD key; lexicographic order equals chronological order
CalendarDay: TypeAlias = str
