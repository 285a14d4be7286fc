# SPDX-License-Identifier: MIT

from fieldtask.model.task import LanguageCode

SUPPORTED_LANGUAGES: dict[LanguageCode, str] = {
    "en": "English",
    "es": "Español",
}

FALLBACK_LANGUAGE: LanguageCode = "en"


class Label:
    TASK_DETAILS_TITLE = "task_details_title"
    NO_TASKS_AVAILABLE = "no_tasks_available"
    CLOCK_TITLE = "clock_title"
    CLOCK_NO_TASKS = "clock_no_tasks"
    CLOCK_TASKS_FOR = "clock_tasks_for"
    LANGUAGE = "language"


_LABELS: dict[LanguageCode, dict[str, str]] = {
    "en": {
        Label.TASK_DETAILS_TITLE: "Task Details",
        Label.NO_TASKS_AVAILABLE: "No tasks available for this date.",
        Label.CLOCK_TITLE: "Clock",
        Label.CLOCK_NO_TASKS: "No tasks for this date.",
        Label.CLOCK_TASKS_FOR: "Tasks for {date}",
        Label.LANGUAGE: "Language",
    },
    "es": {
        Label.TASK_DETAILS_TITLE: "Detalles de tareas",
        Label.NO_TASKS_AVAILABLE: "No hay tareas disponibles para esta fecha.",
        Label.CLOCK_TITLE: "Reloj",
        Label.CLOCK_NO_TASKS: "No hay tareas para esta fecha.",
        Label.CLOCK_TASKS_FOR: "Tareas para el {date}",
        Label.LANGUAGE: "Idioma",
    },
}


def label(key: str, language: LanguageCode, **kwargs: str) -> str:
    """
    Look up an interface label.

    Interface chrome falls back to English for unsupported languages. Task
    text never does, see service.schedule.localized.
    """
    labels = _LABELS.get(language, _LABELS[FALLBACK_LANGUAGE])
    text = labels.get(key, _LABELS[FALLBACK_LANGUAGE].get(key, ""))
    if kwargs:
        return text.format(**kwargs)
    return text


def language_name(language: LanguageCode) -> str:
    return SUPPORTED_LANGUAGES.get(language, language)


def is_supported_language(language: LanguageCode) -> bool:
    return language in SUPPORTED_LANGUAGES
