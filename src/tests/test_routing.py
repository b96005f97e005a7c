"""Unit tests for request path parsing."""

import pytest

from flatwiki.core.routing import (
    Action,
    InvalidPath,
    Operation,
    is_valid_title,
    parse_action_path,
)


class TestParseActionPath:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/view/FrontPage", Action(Operation.VIEW, "FrontPage")),
            ("/edit/Page2", Action(Operation.EDIT, "Page2")),
            ("/save/x", Action(Operation.SAVE, "x")),
        ],
    )
    def test_valid_paths(self, path, expected):
        assert parse_action_path(path) == expected

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/view/",
            "/view",
            "/delete/FrontPage",
            "/view/Front_Page",
            "/view/Front Page",
            "/view/Page.txt",
            "/view/../secret",
            "/view/a/b",
            "view/FrontPage",
            "/VIEW/FrontPage",
            "/view/FrontPage\n",
            "/view/Café",
        ],
    )
    def test_invalid_paths(self, path):
        with pytest.raises(InvalidPath):
            parse_action_path(path)

    def test_invalid_path_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            parse_action_path("/nope")
        assert exc_info.value.path == "/nope"


class TestIsValidTitle:
    def test_alphanumeric(self):
        assert is_valid_title("FrontPage2")

    def test_empty(self):
        assert not is_valid_title("")

    def test_separator(self):
        assert not is_valid_title("a/b")

    def test_extension(self):
        assert not is_valid_title("page.txt")
