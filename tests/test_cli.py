from conftest import PLAYER_ID, FakeResponse, FakeSessionClient, profile_response
from skull_cacher import __main__ as cli
from skull_cacher.client import SkullCacherClient
from skull_cacher.store import TextureStore


def test_parser_defaults():
    options = cli.get_parser().parse_args(["Steve", str(PLAYER_ID)])

    assert options.players == ["Steve", str(PLAYER_ID)]
    assert options.ignore_errors is False


def patch_client(monkeypatch, http_client):
    original = SkullCacherClient.from_settings.__func__

    def from_settings(cls, settings=None, **kwargs):
        kwargs["http_client"] = http_client
        return original(cls, settings, **kwargs)

    monkeypatch.setattr(SkullCacherClient, "from_settings", classmethod(from_settings))
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def test_main_prints_and_persists(monkeypatch, capsys, cache_dir):
    http_client = FakeSessionClient({PLAYER_ID: profile_response("S", "V")})
    patch_client(monkeypatch, http_client)
    options = cli.get_parser().parse_args(
        [str(PLAYER_ID), "--cache-dir", str(cache_dir)]
    )

    assert cli.main(options) == 0

    assert f"{PLAYER_ID} S V\n" in capsys.readouterr().out
    assert [t.identifier for t in TextureStore().load(cache_dir)] == [PLAYER_ID]


def test_main_reports_failures(monkeypatch, capsys, cache_dir):
    patch_client(monkeypatch, FakeSessionClient({PLAYER_ID: FakeResponse(404)}))
    options = cli.get_parser().parse_args(
        [str(PLAYER_ID), "--cache-dir", str(cache_dir)]
    )

    assert cli.main(options) == 1
    assert f"{PLAYER_ID}: fail\n" in capsys.readouterr().err
