import importlib


def test_serverless_entry_exposes_app_without_migrating(monkeypatch):
    from dispatchboard import migration_runner
    from dispatchboard.main import app

    calls = []
    monkeypatch.setattr(migration_runner, "run_migrations_once", lambda: calls.append(True))
    module = importlib.import_module("api.index")
    module = importlib.reload(module)

    assert module.app is app
    assert calls == []
