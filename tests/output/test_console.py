"""Tests for the Rich console factory."""

from untd.output.console import UNTD_THEME, create_console, get_output, styled_line


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_theme_styles_present(self) -> None:
        for name in ("untd.ok", "untd.error", "untd.warning"):
            assert name in UNTD_THEME.styles

    def test_styled_line_is_plain_off_tty(self) -> None:
        assert styled_line("Copied to clipboard!", "untd.ok") == "Copied to clipboard!"

    def test_styled_line_ignores_markup(self) -> None:
        assert styled_line("[bold]x[/bold]", "untd.warning") == "[bold]x[/bold]"
