# SPDX-License-Identifier: MIT

from fieldtask.model.calendar_day import CalendarDay
from fieldtask.model.task import TaskRecord
from fieldtask.model.task_status import TaskStatus

# Sample inspection schedule for field workers, December 2024
SEED_SCHEDULE: dict[CalendarDay, list[TaskRecord]] = {
    "2024-12-10": [
        {
            "title": {"en": "Prepare Equipment", "es": "Preparar el equipo"},
            "time": "8:00 AM",
            "description": {
                "en": "Ensure all equipment is ready for the day's inspections.",
                "es": "Asegúrese de que todo el equipo esté listo para las inspecciones del día.",
            },
            "status": TaskStatus.FINISHED,
        },
        {
            "title": {"en": "Morning Briefing", "es": "Reunión matutina"},
            "time": "9:00 AM",
            "description": {
                "en": "Discuss the day's tasks and assignments.",
                "es": "Discutir las tareas y asignaciones del día.",
            },
            "status": TaskStatus.FINISHED,
        },
    ],
    "2024-12-11": [
        {
            "title": {
                "en": "Review Compliance Reports",
                "es": "Revisar informes de cumplimiento",
            },
            "time": "1:30 PM",
            "description": {
                "en": "Analyze reports submitted by facilities.",
                "es": "Analizar los informes presentados por las instalaciones.",
            },
            "status": TaskStatus.NOT_DONE,
        },
        {
            "title": {
                "en": "Inspect Hazardous Waste Site",
                "es": "Inspeccionar el sitio de residuos peligrosos",
            },
            "time": "9:00 AM",
            "description": {
                "en": (
                    "Conduct a thorough inspection of the hazardous waste site to "
                    "ensure compliance with federal and state regulations. Verify "
                    "containment measures and document any violations."
                ),
                "es": (
                    "Realice una inspección exhaustiva del sitio de residuos "
                    "peligrosos para garantizar el cumplimiento de las normativas "
                    "federales y estatales. Verifique las medidas de contención y "
                    "documente cualquier infracción."
                ),
            },
            "status": TaskStatus.STOPPED,
        },
    ],
    "2024-12-12": [
        {
            "title": {
                "en": "Site Evacuation Drill",
                "es": "Simulacro de evacuación del sitio",
            },
            "time": "10:00 AM",
            "description": {
                "en": "Conduct an evacuation drill and document any issues.",
                "es": "Realice un simulacro de evacuación y documente cualquier problema.",
            },
            "status": TaskStatus.FUTURE,
        },
    ],
    "2024-12-17": [
        {
            "title": {"en": "Community Meeting", "es": "Reunión comunitaria"},
            "time": "10:00 AM",
            "description": {
                "en": "Discuss environmental safety with the local community.",
                "es": "Discutir la seguridad ambiental con la comunidad local.",
            },
            "status": TaskStatus.FUTURE,
        },
        {
            "title": {"en": "Safety Training", "es": "Capacitación en seguridad"},
            "time": "3:00 PM",
            "description": {
                "en": "Conduct training on handling hazardous materials.",
                "es": "Realizar capacitación sobre el manejo de materiales peligrosos.",
            },
            "status": TaskStatus.FUTURE,
        },
    ],
}
