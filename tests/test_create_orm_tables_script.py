from __future__ import annotations

import importlib.util
from pathlib import Path


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "create_orm_tables.py"


def _load_script():
    module_spec = importlib.util.spec_from_file_location("create_orm_tables", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_reports_then_creates_missing_tables(tmp_path, capsys) -> None:
    script = _load_script()
    url = f"sqlite:///{tmp_path / 'fresh.db'}"

    assert script.main(["--db-url", url]) == 1
    assert "missing tables: users, user_topics, connections" in capsys.readouterr().out

    assert script.main(["--db-url", url, "--create"]) == 2

    assert script.main(["--db-url", url, "--create", "--i-understand"]) == 0
    assert "created: users, user_topics, connections" in capsys.readouterr().out

    assert script.main(["--db-url", url]) == 0
    assert script.missing_tables(script._engine_for(url)) == []
