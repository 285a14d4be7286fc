import pytest

from fieldtask.model.task_status import TaskStatus
from fieldtask.repository.schedule import (
    StaticScheduleRepository,
    YamlScheduleRepository,
    write_schedule_file,
)
from fieldtask.seed import SEED_SCHEDULE


def test_yaml_repository_reads_written_seed(tmp_path):
    path = tmp_path / "schedule.yaml"
    write_schedule_file(path, SEED_SCHEDULE)

    repository = YamlScheduleRepository(path)

    assert repository.get_all_days() == sorted(SEED_SCHEDULE.keys())
    assert repository.get("2024-12-11") == SEED_SCHEDULE["2024-12-11"]
    assert (
        repository.get("2024-12-12")[0]["title"]["es"]
        == "Simulacro de evacuación del sitio"
    )


def test_yaml_repository_missing_file_is_empty(tmp_path):
    repository = YamlScheduleRepository(tmp_path / "missing.yaml")

    assert repository.get("2024-12-11") == []
    assert repository.get_all_days() == []


@pytest.mark.parametrize(
    "content",
    [
        "schedule: [unclosed",
        "",
        "- just\n- a list\n",
        "other: {}\n",
        "schedule: 3\n",
    ],
)
def test_yaml_repository_malformed_file_is_empty(tmp_path, content):
    path = tmp_path / "schedule.yaml"
    path.write_text(content, encoding="utf-8")

    repository = YamlScheduleRepository(path)

    assert repository.get_all_days() == []


def test_yaml_repository_normalizes_records(tmp_path):
    path = tmp_path / "schedule.yaml"
    path.write_text(
        "schedule:\n"
        "  2024-12-20:\n"
        "    - title: {en: Audit Storage Tanks}\n"
        "      time: 11:00 AM\n"
        "    - just a string\n"
        "  2024-12-21: not a list\n",
        encoding="utf-8",
    )

    repository = YamlScheduleRepository(path)

    assert repository.get_all_days() == ["2024-12-20"]
    assert repository.get("2024-12-20") == [
        {
            "title": {"en": "Audit Storage Tanks"},
            "time": "11:00 AM",
            "description": {},
            "status": TaskStatus.UNKNOWN,
        }
    ]


def test_static_repository_is_isolated_from_source(seed_schedule):
    repository = StaticScheduleRepository(seed_schedule)

    seed_schedule["2024-12-12"][0]["status"] = TaskStatus.FINISHED
    seed_schedule["2024-12-13"] = []

    assert repository.get("2024-12-12")[0]["status"] == TaskStatus.FUTURE
    assert "2024-12-13" not in repository.get_all_days()


def test_static_repository_index_is_read_only(seed_repository):
    with pytest.raises(TypeError):
        seed_repository.index["2024-12-13"] = ()  # type: ignore[index]


def test_has_tasks(seed_repository):
    assert seed_repository.has_tasks("2024-12-17")
    assert not seed_repository.has_tasks("2024-12-18")


def test_yaml_repository_keeps_unquoted_times_as_written(tmp_path):
    path = tmp_path / "schedule.yaml"
    path.write_text(
        "schedule:\n"
        "  2024-12-20:\n"
        "    - title: {en: Calibrate Gas Detectors}\n"
        "      time: 8:00\n"
        "      status: finished\n",
        encoding="utf-8",
    )

    repository = YamlScheduleRepository(path)

    task = repository.get("2024-12-20")[0]
    assert task["time"] == "8:00"
    assert task["status"] == TaskStatus.FINISHED
