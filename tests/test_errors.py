"""
Tests for error chain helpers.
"""

from tilemenu.errors import (
    ApplicationNotFound,
    ConfigReadFailed,
    EntryResolutionError,
    ResolutionError,
    find_cause,
    format_error_chain,
    iter_error_chain,
)


def _chain():
    try:
        try:
            raise ApplicationNotFound("vlc")
        except ApplicationNotFound as e:
            raise EntryResolutionError("m/v") from e
    except EntryResolutionError as e:
        try:
            raise ResolutionError("failed to validate config") from e
        except ResolutionError as outer:
            return outer


class TestErrorChain:
    """Test walking and printing chained errors."""

    def test_iterates_outermost_first(self):
        kinds = [type(e) for e in iter_error_chain(_chain())]
        assert kinds == [ResolutionError, EntryResolutionError, ApplicationNotFound]

    def test_find_cause(self):
        found = find_cause(_chain(), ApplicationNotFound)
        assert found.app_id == "vlc"

    def test_find_cause_missing(self):
        assert find_cause(_chain(), ConfigReadFailed) is None

    def test_format(self):
        assert format_error_chain(_chain()) == (
            "failed to validate config\n"
            "caused by: failed to resolve entry 'm/v'\n"
            "caused by: couldn't find desktop file for: vlc"
        )

    def test_includes_implicit_context(self):
        try:
            try:
                raise OSError("disk on fire")
            except OSError:
                raise ConfigReadFailed("/tmp/menu.json")
        except ConfigReadFailed as e:
            err = e
        assert "caused by: disk on fire" in format_error_chain(err)
