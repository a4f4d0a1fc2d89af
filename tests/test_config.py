from voucher_management.config import load_settings


def test_defaults(monkeypatch):
    for name in ("VOUCHER_MIN_AMOUNT", "VOUCHER_HOST", "VOUCHER_PORT", "VOUCHER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.min_amount == 100
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("VOUCHER_MIN_AMOUNT", "250.5")
    monkeypatch.setenv("VOUCHER_PORT", "9001")
    monkeypatch.setenv("VOUCHER_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.min_amount == 250.5
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"
