from stuman.database import DEFAULT_DATABASE_PATH
from stuman.settings import Settings


def test_defaults_without_file(tmp_path):
    settings = Settings(tmp_path / "config.ini")
    assert settings.database_path == DEFAULT_DATABASE_PATH
    assert settings.cache_enabled is True
    assert settings.last_user == ""


def test_values_persist(tmp_path):
    path = tmp_path / "config.ini"
    settings = Settings(path)
    settings.database_path = "/data/school.db"
    settings.cache_enabled = False
    settings.last_user = "teacher"

    reloaded = Settings(path)
    assert reloaded.database_path == "/data/school.db"
    assert reloaded.cache_enabled is False
    assert reloaded.last_user == "teacher"


def test_file_layout(tmp_path):
    path = tmp_path / "config.ini"
    settings = Settings(path)
    settings.database_path = "/data/school.db"
    settings.cache_enabled = True
    text = path.read_text(encoding="utf-8")
    assert "[Database]" in text
    assert "Path=/data/school.db" in text
    assert "[Login]" in text
    assert "CacheEnabled=true" in text


def test_reads_existing_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[Login]\nCacheEnabled=false\nLastUser=admin\n", encoding="utf-8"
    )
    settings = Settings(path)
    assert settings.cache_enabled is False
    assert settings.last_user == "admin"
    assert settings.database_path == DEFAULT_DATABASE_PATH


def test_save_without_changes_roundtrips(tmp_path):
    path = tmp_path / "config.ini"
    first = Settings(path)
    first.last_user = "someone"
    second = Settings(path)
    second.save()
    assert Settings(path).last_user == "someone"