from attendance_tracker.main import _cors_origins


def test_cors_origins_wildcard_or_list():
    assert _cors_origins("*") == "*"
    assert _cors_origins("") == "*"
    assert _cors_origins("https://a.example, https://b.example") == ["https://a.example", "https://b.example"]
    assert _cors_origins(["https://a.example", "*"]) == "*"
