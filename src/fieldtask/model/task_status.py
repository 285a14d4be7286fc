# SPDX-License-Identifier: MIT


class TaskStatus:
    FINISHED = "finished"
    NOT_DONE = "not_done"
    STOPPED = "stopped"
    FUTURE = "future"
    UNKNOWN = "unknown"


class StatusTier:
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    NEUTRAL = "neutral"
