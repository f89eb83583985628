import pytest

from shardcache.cache.file_cache import SimpleFileCache


@pytest.fixture
def cache(tmp_path):
    """A cache rooted in a per-test folder."""
    return SimpleFileCache.from_folder(tmp_path / "cache")


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point every config layer at an empty per-test location."""
    import shardcache.config.hierarchy as hierarchy

    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "home" / "config.yaml")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHARDCACHE_ROOT", raising=False)
    monkeypatch.delenv("SHARDCACHE_LOG_LEVEL", raising=False)
    return tmp_path
