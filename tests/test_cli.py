from typer.testing import CliRunner
from unittest.mock import MagicMock

from main import app
from config import settings
from library import CatalogManager, ErrorKind, Outcome

runner = CliRunner()


def _menu(*lines):
    return "\n".join(lines) + "\n"

def test_exit_immediately():
    result = runner.invoke(app, ["menu"], input=_menu("0"))
    assert result.exit_code == 0
    assert "Goodbye!" in result.stdout

def test_no_subcommand_starts_menu():
    result = runner.invoke(app, [], input=_menu("0"))
    assert result.exit_code == 0
    assert "Add Book" in result.stdout
    assert "Goodbye!" in result.stdout

def test_list_empty_catalog():
    result = runner.invoke(app, ["menu"], input=_menu("5", "6", "0"))
    assert result.exit_code == 0
    assert "No items in library." in result.stdout
    assert "No users registered." in result.stdout

def test_checkout_return_session():
    result = runner.invoke(app, ["menu"], input=_menu(
        "1", "101", "Dune", "Herbert", "",   # add book, no ISBN
        "3", "1", "Amy",                     # add patron
        "5",                                 # list items
        "7", "101", "1",                     # checkout
        "7", "101", "1",                     # checkout again
        "8", "101",                          # return
        "8", "101",                          # return again
        "0",
    ))
    assert result.exit_code == 0
    out = result.stdout
    assert "Item added." in out
    assert "User added." in out
    assert "Book      ID: 101 | Title: Dune | Author: Herbert | Status: Available" in out
    assert 'Amy checked out "Dune" for 21 days.' in out
    assert "Item already checked out." in out
    assert "Item returned." in out
    assert "Item is already available." in out

def test_checkout_unknown_item():
    result = runner.invoke(app, ["menu"], input=_menu("3", "1", "Amy", "7", "999", "1", "0"))
    assert result.exit_code == 0
    assert "Item not found." in result.stdout

def test_add_magazine_and_list_users():
    result = runner.invoke(app, ["menu"], input=_menu(
        "2", "7", "12", "Wired",
        "4", "2", "Bob",
        "5", "6", "0",
    ))
    assert result.exit_code == 0
    assert "Magazine  ID: 7 | Title: Wired | Issue: 12 | Status: Available" in result.stdout
    assert "Librarian ID: 2 | Name: Bob | Full privileges" in result.stdout

def test_manage_users_is_librarian_only():
    result = runner.invoke(app, ["menu"], input=_menu(
        "3", "1", "Amy",
        "4", "2", "Bob",
        "9", "1",
        "9", "2",
        "0",
    ))
    assert result.exit_code == 0
    assert "Only librarians can manage users." in result.stdout
    assert "Bob is managing users." in result.stdout
    assert "Patron    ID: 1 | Name: Amy" in result.stdout

def test_invalid_id_is_prompted_again():
    result = runner.invoke(app, ["menu"], input=_menu("1", "abc", "101", "Dune", "Herbert", "", "0"))
    assert result.exit_code == 0
    assert "Item added." in result.stdout

def test_menu_passes_parsed_ids(monkeypatch):
    checkout_mock = MagicMock(return_value=Outcome.fail(ErrorKind.NOT_FOUND, "Item not found."))
    monkeypatch.setattr(CatalogManager, "checkout_item", checkout_mock)

    result = runner.invoke(app, ["menu"], input=_menu("7", "12", "34", "0"))
    assert result.exit_code == 0
    checkout_mock.assert_called_once_with(12, 34)

def test_stats_action():
    result = runner.invoke(app, ["menu"], input=_menu("1", "1", "Dune", "Herbert", "", "10", "0"))
    assert result.exit_code == 0
    assert "Total Items: 1" in result.stdout

def test_json_output_option():
    result = runner.invoke(app, ["--output", "json", "menu"], input=_menu("1", "101", "Dune", "Herbert", "", "5", "0"))
    assert result.exit_code == 0
    assert '"success": true' in result.stdout
    assert '"id": 101' in result.stdout

def test_end_of_input_exits_cleanly():
    result = runner.invoke(app, ["menu"], input=_menu("5"))
    assert result.exit_code == 0
    assert "Goodbye!" in result.stdout

def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert settings.app_version in result.stdout
