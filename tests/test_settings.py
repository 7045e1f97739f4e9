from itemhelper.settings import _int_env


def test_int_env_reads_number(monkeypatch):
    monkeypatch.setenv("ITEMHELPER_TRUNCATE_LIMIT", "80")
    assert _int_env("ITEMHELPER_TRUNCATE_LIMIT", 160) == 80

def test_int_env_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("ITEMHELPER_TRUNCATE_LIMIT", "lots")
    assert _int_env("ITEMHELPER_TRUNCATE_LIMIT", 160) == 160

def test_int_env_missing(monkeypatch):
    monkeypatch.delenv("ITEMHELPER_TRUNCATE_LIMIT", raising=False)
    assert _int_env("ITEMHELPER_TRUNCATE_LIMIT", 160) == 160
