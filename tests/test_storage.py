import json

from gog_achievements.models import ExportedAchievement, ExportedGame
from gog_achievements.storage import AchievementStorage


def _game(app_id=1207658924, name="Unreal Tournament 2004"):
    return ExportedGame(
        name=name,
        app_id=app_id,
        achievements=[
            ExportedAchievement(
                name="Über", description="ünïcödé", image_url="https://i/1.png",
                hidden=1, unlocked=True, api_name="uber",
            ),
            ExportedAchievement(name="Two", api_name="two"),
        ],
    )


def test_save_game_writes_expected_file(tmp_path):
    storage = AchievementStorage(tmp_path)

    path = storage.save_game(_game())

    assert path == tmp_path / "Achievements" / "GOG" / "1207658924.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["appid"] == 1207658924
    assert data["platform"] == "GOG"
    assert data["method"] == "GOG API"
    assert data["imageUrl"] == ""
    assert data["achievements"][0] == {
        "name": "Über",
        "description": "ünïcödé",
        "imageUrl": "https://i/1.png",
        "hidden": 1,
        "id": 0,
        "unlocked": True,
        "apiName": "uber",
        "getglobalpercentage": 0,
        "difficulty": 0,
    }


def test_save_then_load_is_lossless(tmp_path):
    storage = AchievementStorage(tmp_path)
    game = _game()

    storage.save_game(game)

    assert storage.load_game(game.app_id) == game


def test_save_overwrites_with_identical_bytes(tmp_path):
    storage = AchievementStorage(tmp_path)
    path = storage.save_game(_game(name="Old Name"))

    storage.save_game(_game())
    first = path.read_bytes()
    storage.save_game(_game())

    assert path.read_bytes() == first
    assert b"Old Name" not in first


def test_constructor_does_not_create_directories(tmp_path):
    storage = AchievementStorage(tmp_path / "out")

    assert not storage.achievements_dir.exists()
    assert storage.list_games() == []


def test_base_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("GOG_EXPORT_DIR", str(tmp_path))

    assert AchievementStorage().achievements_dir == tmp_path / "Achievements" / "GOG"


def test_load_missing_game(tmp_path):
    assert AchievementStorage(tmp_path).load_game(1) is None


def test_list_games_sorted_and_skips_corrupt(tmp_path):
    storage = AchievementStorage(tmp_path)
    storage.save_game(_game(app_id=30, name="C"))
    storage.save_game(_game(app_id=10, name="A"))
    (storage.achievements_dir / "broken.json").write_text("{", encoding="utf-8")

    games = storage.list_games()

    assert [g.app_id for g in games] == [10, 30]


def test_list_games_skips_undecodable_and_directories(tmp_path):
    storage = AchievementStorage(tmp_path)
    storage.save_game(_game(app_id=10, name="A"))
    (storage.achievements_dir / "bad.json").write_bytes(b"\xff\xfe{")
    (storage.achievements_dir / "folder.json").mkdir()

    games = storage.list_games()

    assert [g.app_id for g in games] == [10]


def test_load_then_save_is_byte_identical(tmp_path):
    storage = AchievementStorage(tmp_path)
    path = storage.save_game(_game())
    first = path.read_bytes()

    storage.save_game(storage.load_game(1207658924))

    assert path.read_bytes() == first
    assert b'"getglobalpercentage": 0,' in first
