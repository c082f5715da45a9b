import importlib


def test_version_fallback_to_unknown(monkeypatch):
    # Patch importlib.metadata.version to raise PackageNotFoundError
    import importlib.metadata as md

    def _raise(_name):
        raise md.PackageNotFoundError

    monkeypatch.setattr(md, "version", _raise, raising=True)

    import restrictedstr._version_info as version_info
    version_info = importlib.reload(version_info)
    assert version_info.__version__ == "unknown"

    # Reload again after monkeypatch auto-reverts, to restore normal behavior
    monkeypatch.undo()
    version_info = importlib.reload(version_info)
    assert isinstance(version_info.__version__, str)
    assert version_info.__version__ != "unknown"
