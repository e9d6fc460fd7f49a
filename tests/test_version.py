import codeprops


def test_get_version_matches_public_api() -> None:
    assert codeprops.get_version() == codeprops.__version__
    assert isinstance(codeprops.__version__, str)
