import io

from menuflow.config import Settings
from menuflow.domain.directors import next_state, stop
from menuflow.execution.console import Console
from menuflow.execution.prompts.loader import render_menu, render_path
from menuflow.sources.adapters.stream_scanner import StreamScanner


def test_menu_is_numbered_from_start() -> None:
    assert render_menu(["Add", "Sub"]) == "1. Add\n2. Sub\n"
    assert render_menu(["No", "Yes"], start=0) == "0. No\n1. Yes\n"


def test_menu_title_comes_first() -> None:
    assert render_menu(["Add"], title="Pick one:") == "Pick one:\n1. Add\n"


def test_path_marks_current_state() -> None:
    assert render_path(["menu", "add"]) == "1. menu\n2. add (current)\n"
    assert render_path([]) == ""


def test_console_prints_menu_and_path() -> None:
    output = io.StringIO()
    console = Console(StreamScanner.from_text(""), output, settings=Settings(GREETING_TEXT=""))
    console.register("menu", lambda cns: cns.print_menu(["Only"], title="Menu"), next_state("info"))
    console.register("info", lambda cns: cns.print_path(), stop())
    console.run()

    assert output.getvalue() == "Menu\n1. Only\n1. menu\n2. info (current)\n"
