"""Basic smoke tests"""

import ron_settings


def test_imports():
    """Test that all modules can be imported"""
    from ron_settings import errors, observability, resolver, ron, settings, storage

    assert ron_settings.__version__
    for name in ron_settings.__all__:
        assert hasattr(ron_settings, name)


def test_error_hierarchy():
    """Test every error kind shares one base class"""
    from ron_settings import (
        DeserializeError,
        NotFoundError,
        OpenError,
        SerializeError,
        SettingsError,
    )

    for error in (OpenError, DeserializeError, SerializeError, NotFoundError):
        assert issubclass(error, SettingsError)


def test_file_name():
    assert ron_settings.FILE_NAME == "settings.ron"
