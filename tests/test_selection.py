from fieldtask.configuration import get_default_configuration
from fieldtask.service.selection import select, selection_from_config
from fieldtask.template.selection import get_selection_template


def test_default_selection():
    assert get_selection_template() == {"selected_day": "2024-12-12", "language": "en"}


def test_select_returns_new_state():
    selection = get_selection_template()

    changed = select(selection, day="2024-12-11", language="es")

    assert changed == {"selected_day": "2024-12-11", "language": "es"}
    assert selection == {"selected_day": "2024-12-12", "language": "en"}


def test_select_keeps_unspecified_fields():
    selection = {"selected_day": "2024-12-17", "language": "es"}

    assert select(selection, language="en") == {
        "selected_day": "2024-12-17",
        "language": "en",
    }
    assert select(selection) == selection


def test_selection_from_config():
    config = get_default_configuration()
    config["language"] = "es"
    config["selected_day"] = "2024-12-10"

    assert selection_from_config(config) == {
        "selected_day": "2024-12-10",
        "language": "es",
    }
