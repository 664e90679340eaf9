# tests/test_server.py

from fastapi import FastAPI

from playstore.config import Settings
from playstore.server import StartupSequencer, StartupState


class RecordingServe:
    def __init__(self):
        self.calls = []

    def __call__(self, app, **kwargs):
        self.calls.append((app, kwargs))


def test_probe_success_starts_listening(settings):
    serve = RecordingServe()
    sequencer = StartupSequencer(settings, port=4321, serve=serve)
    assert sequencer.state is StartupState.INIT

    status = sequencer.run()

    assert status == 0
    assert sequencer.state is StartupState.LISTENING
    assert len(serve.calls) == 1
    app, kwargs = serve.calls[0]
    assert isinstance(app, FastAPI)
    assert app.state.engine is sequencer.engine
    assert kwargs == {"host": settings.APP_HOST, "port": 4321}
    sequencer.engine.dispose()


def test_probe_returns_connection_to_pool(settings):
    sequencer = StartupSequencer(settings, port=4321, serve=RecordingServe())

    assert sequencer.probe() is True
    assert sequencer.state is StartupState.PROBING
    assert sequencer.engine.pool.checkedout() == 0
    sequencer.engine.dispose()


def test_probe_failure_does_not_listen(tmp_path):
    unreachable = Settings(
        _env_file=None,
        DB_USER="user",
        DB_PW="secret",
        DB_URL=f"sqlite:///{tmp_path / 'missing' / 'dir' / 'playstore.db'}",
    )
    serve = RecordingServe()
    sequencer = StartupSequencer(unreachable, port=4321, serve=serve)

    status = sequencer.run()

    assert status == 1
    assert sequencer.state is StartupState.FAILED
    assert serve.calls == []
    assert sequencer.app is None
