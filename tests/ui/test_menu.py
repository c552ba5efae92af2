"""Tests for the interactive menu shell."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import typer

from tasklist_cli.models import TaskStatus
from tasklist_cli.ui.menu import MenuShell


def run_menu(service, answers, **options):
    """Run the shell feeding ``answers`` to every prompt in order."""
    options.setdefault("clear_screen", False)
    options.setdefault("pause", False)
    shell = MenuShell(service, **options)
    with patch("typer.prompt", side_effect=answers) as prompt:
        shell.run()
    return prompt


@pytest.fixture()
def seeded(task_service):
    task_service.add("Buy milk")
    task_service.add("Write report")
    return task_service


class TestLoop:
    def test_exit(self, task_service, capsys):
        run_menu(task_service, ["0"])
        out = capsys.readouterr().out
        assert "0 task(s) loaded." in out
        assert "MAIN MENU" in out
        assert "Exiting..." in out

    def test_loaded_count(self, seeded, capsys):
        run_menu(seeded, ["0"])
        assert "2 task(s) loaded." in capsys.readouterr().out

    def test_invalid_option_keeps_looping(self, task_service, capsys):
        prompt = run_menu(task_service, ["9", "0"])
        assert "Invalid option" in capsys.readouterr().out
        assert prompt.call_count == 2

    def test_pause_after_action(self, task_service):
        prompt = run_menu(task_service, ["9", "", "0"], pause=True)
        assert "Press Enter" in prompt.call_args_list[1].args[0]

    def test_end_of_input_exits(self, task_service, capsys):
        run_menu(task_service, [typer.Abort()])
        assert "Exiting..." in capsys.readouterr().out

    def test_clear_screen(self, task_service):
        shell = MenuShell(task_service, clear_screen=True, pause=False)
        with (
            patch.object(shell.console, "clear") as clear,
            patch("typer.prompt", side_effect=["9", "0"]),
        ):
            shell.run()
        assert clear.call_count == 2


class TestView:
    def test_view_all_then_back(self, seeded, capsys):
        run_menu(seeded, ["1", "1", "0", "0"])
        out = capsys.readouterr().out
        assert "Buy milk" in out
        assert "Write report" in out

    def test_view_back_from_filter(self, seeded, capsys):
        prompt = run_menu(seeded, ["1", "0", "0"])
        assert prompt.call_count == 3
        assert "Buy milk" not in capsys.readouterr().out

    def test_view_filter_without_matches(self, seeded, capsys):
        run_menu(seeded, ["1", "4", "0"])
        assert "No tasks to show for that filter." in capsys.readouterr().out

    def test_unknown_filter_lists_all(self, seeded, capsys):
        run_menu(seeded, ["1", "7", "", "0"])
        out = capsys.readouterr().out
        assert "Buy milk" in out
        assert "Write report" in out

    def test_detail_view(self, seeded, capsys):
        run_menu(seeded, ["1", "1", "2", "", "0"])
        out = capsys.readouterr().out
        assert "No description" in out
        assert "[*--]" in out

    def test_detail_edit(self, seeded):
        # main, filter, id, detail action, then title/description/status/due/cost/difficulty
        run_menu(seeded, ["1", "1", "1", "e", "", "", "3", "", "", "", "0"])
        assert seeded.get_task(1).status is TaskStatus.DONE
        assert seeded.get_task(1).title == "Buy milk"

    def test_detail_delete(self, seeded):
        run_menu(seeded, ["1", "1", "2", "d", "s", "0"])
        assert [t.id for t in seeded.tasks] == [1]

    def test_bad_id_reports_error(self, seeded, capsys):
        run_menu(seeded, ["1", "1", "abc", "0"])
        assert "Invalid task ID" in capsys.readouterr().out

    def test_unknown_id_reports_error(self, seeded, capsys):
        run_menu(seeded, ["1", "1", "9", "0"])
        assert "Task 9 not found" in capsys.readouterr().out


class TestActions:
    def test_search(self, seeded, capsys):
        run_menu(seeded, ["2", "MILK", "0"])
        out = capsys.readouterr().out
        assert "1 task(s) found:" in out
        assert "Buy milk" in out

    def test_search_without_results(self, seeded, capsys):
        run_menu(seeded, ["2", "zzz", "0"])
        assert "No tasks found with that word." in capsys.readouterr().out

    def test_add(self, task_service, capsys):
        run_menu(task_service, ["3", "New task", "details", "", "2.5", "2", "0"])
        task = task_service.get_task(1)
        assert task.title == "New task"
        assert task.description == "details"
        assert task.cost == 2.5
        assert task.difficulty.value == 2
        assert "Task 1 saved." in capsys.readouterr().out

    def test_add_with_junk_values(self, task_service):
        run_menu(task_service, ["3", "Junk", "", "", "free", "hard-ish", "0"])
        task = task_service.get_task(1)
        assert task.cost == 0.0
        assert task.difficulty.value == 1

    def test_edit(self, seeded, capsys):
        run_menu(seeded, ["4", "2", "Final report", "", "", "", "", "", "0"])
        assert seeded.get_task(2).title == "Final report"
        assert "Task 2 updated." in capsys.readouterr().out

    def test_edit_bad_id(self, seeded, capsys):
        run_menu(seeded, ["4", "two", "0"])
        assert "Invalid task ID" in capsys.readouterr().out

    def test_edit_missing_task(self, seeded, capsys):
        prompt = run_menu(seeded, ["4", "9", "0"])
        assert "Task 9 not found" in capsys.readouterr().out
        assert prompt.call_count == 3

    def test_delete_confirmed(self, seeded, capsys):
        run_menu(seeded, ["5", "1", "si", "0"])
        assert [t.id for t in seeded.tasks] == [2]
        assert "Task deleted." in capsys.readouterr().out

    def test_delete_cancelled(self, seeded, capsys):
        run_menu(seeded, ["5", "1", "n", "0"])
        assert len(seeded.tasks) == 2
        assert "Operation cancelled." in capsys.readouterr().out

    def test_delete_missing_task(self, seeded, capsys):
        run_menu(seeded, ["5", "7", "0"])
        assert "Task 7 not found" in capsys.readouterr().out
