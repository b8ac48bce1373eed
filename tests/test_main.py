import uvicorn

from playversion import main
from playversion.config import settings


def test_run_reloads_only_in_debug(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    monkeypatch.setattr(settings, "DEBUG", True)
    main.run()
    monkeypatch.setattr(settings, "DEBUG", False)
    main.run()

    assert [kwargs["reload"] for _, kwargs in calls] == [True, False]
    args, kwargs = calls[0]
    assert args == ("playversion.main:app",)
    assert kwargs["host"] == settings.HOST
    assert kwargs["port"] == settings.PORT
