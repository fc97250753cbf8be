from __future__ import annotations

from datetime import date

import examples.example_usage as example_usage

from fakes import build_fake_container, make_user


def test_example_loads_env_and_writes_report(monkeypatch, tmp_path):
    calls = []

    def fake_load_dotenv(**kwargs):
        calls.append(kwargs)
        monkeypatch.setenv("APP_ENV", "testing")

    container = build_fake_container(users=[make_user(1, "Doe", "John", date(2024, 1, 1))])
    monkeypatch.setattr(example_usage, "load_dotenv", fake_load_dotenv)
    monkeypatch.setattr(example_usage, "build_container", lambda *, db_config: container)
    monkeypatch.setattr("sys.argv", ["example_usage", "2024-01-01", "2024-01-31"])
    monkeypatch.chdir(tmp_path)

    example_usage.main()

    assert calls == [{"override": False}]
    assert (tmp_path / "Attendance_Matrix_2024-01-01_to_2024-01-31.xlsx").stat().st_size > 0
