"""Tests for the Streamlit app."""

from streamlit.testing.v1 import AppTest

from treeviz.launcher import APP_PATH


def _app() -> AppTest:
    return AppTest.from_file(str(APP_PATH), default_timeout=10)


class TestApp:
    def test_empty_text_shows_root(self):
        at = _app().run()
        assert not at.exception
        assert at.code[0].value == "."

    def test_renders_pasted_text(self):
        at = _app().run()
        at.text_area[0].input("A\n\tB\nC").run()
        assert at.code[0].value == ".\n├─ A\n│  └─ B\n└─ C"
        assert "3 lines, 3 nodes" in at.info[0].value

    def test_text_from_query_param(self):
        at = _app()
        at.query_params["text"] = "A\n  B"
        at.run()
        assert at.code[0].value == ".\n└─ A\n   └─ B"
