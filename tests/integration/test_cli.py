"""CLI tests using typer's CliRunner."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from cardforge.cli import app

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture
def rules_file(write_file, small_rules_dict):
    return write_file("rules.yaml", yaml.safe_dump(small_rules_dict, sort_keys=False))


class TestExtractCommand:
    def test_json_output(self, write_file, meeting_notes):
        path = write_file("meeting.txt", meeting_notes)
        result = runner.invoke(app, ["extract", str(path), "--json"])

        assert result.exit_code == 0, result.output
        cards = json.loads(result.stdout)
        assert [c["type"] for c in cards] == ["concept", "action", "checklist", "quote"]
        assert cards[1]["provenance"]["location"] == "Paragraph 2 of 6"
        assert cards[1]["source"] == "meeting.txt"

    def test_summary_output(self, write_file, meeting_notes):
        path = write_file("meeting.txt", meeting_notes)
        result = runner.invoke(app, ["extract", str(path)])

        assert result.exit_code == 0
        assert "4 cards from meeting.txt" in result.output
        assert "Type: action" in result.output

    def test_custom_rules(self, write_file, rules_file):
        path = write_file("note.txt", "The team budget needs a second look.")
        result = runner.invoke(app, ["extract", str(path), "--json", "--rules", str(rules_file)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0]["category"] == "Finance"

    def test_spreadsheet_as_text(self, write_file):
        path = write_file("people.csv", "Name,Age\nAlice,34\nBob,41\n")
        result = runner.invoke(app, ["extract", str(path), "--json", "--as-text"])

        assert result.exit_code == 0, result.output
        cards = json.loads(result.stdout)
        assert [c["content"] for c in cards] == ["Name: Alice | Age: 34", "Name: Bob | Age: 41"]
        assert cards[0]["provenance"]["location"] == "Paragraph 1 of 2"
        assert all(c["category"] != "Data" for c in cards)

    def test_no_cards(self, write_file):
        path = write_file("empty.txt", "n/a\n\n12/25/2023\n")
        result = runner.invoke(app, ["extract", str(path)])

        assert result.exit_code == 1
        assert "No cards could be produced" in result.output

    def test_unsupported_input(self, write_file):
        result = runner.invoke(app, ["extract", str(write_file("scan.pdf", "%PDF"))])
        assert result.exit_code == 1

    def test_invalid_rules(self, write_file):
        path = write_file("note.txt", "The team budget needs a second look.")
        bad = write_file("bad.yaml", "actionVerbs: []\n")
        result = runner.invoke(app, ["extract", str(path), "--rules", str(bad)])

        assert result.exit_code == 1
        assert "Rule set validation failed" in result.output


class TestRegenerateCommand:
    def test_regenerate(self):
        result = runner.invoke(app, ["regenerate", "Action Items: Review budget by Friday", "--source", "edit"])

        assert result.exit_code == 0, result.output
        card = json.loads(result.stdout)
        assert card["type"] == "action"
        assert card["source"] == "edit"
        assert card["provenance"]["location"] == "Paragraph 1 of 1"

    def test_rejected_snippet(self):
        result = runner.invoke(app, ["regenerate", "n/a"])
        assert result.exit_code == 1


class TestRulesCommand:
    def test_validate_valid(self, rules_file):
        result = runner.invoke(app, ["rules", "validate", str(rules_file)])

        assert result.exit_code == 0
        assert "Valid rule set" in result.output
        assert "categories: 2" in result.output

    def test_validate_invalid(self, write_file):
        bad = write_file("bad.json", json.dumps({"cardTypeKeywords": {"concept": ["x"]}, "categoryKeywords": {}, "actionVerbs": []}))
        result = runner.invoke(app, ["rules", "validate", str(bad)])

        assert result.exit_code == 1
        assert "categoryKeywords must have at least one category" in result.output
        assert "actionVerbs must have at least one verb" in result.output

    def test_validate_requires_path(self):
        result = runner.invoke(app, ["rules", "validate"])
        assert result.exit_code == 1

    def test_update_show_reset(self, tmp_path, rules_file):
        store = tmp_path / "store.yaml"

        result = runner.invoke(app, ["rules", "update", str(rules_file), "--store", str(store)])
        assert result.exit_code == 0, result.output
        assert "version 1" in result.output

        result = runner.invoke(app, ["rules", "show", "--store", str(store)])
        assert result.exit_code == 0
        assert "# version 1" in result.output
        assert "Finance" in result.output

        result = runner.invoke(app, ["rules", "reset", "--store", str(store)])
        assert result.exit_code == 0
        assert "version 2" in result.output

    def test_update_requires_store(self, rules_file):
        result = runner.invoke(app, ["rules", "update", str(rules_file)])
        assert result.exit_code == 1

    def test_show_defaults(self):
        result = runner.invoke(app, ["rules", "show"])

        assert result.exit_code == 0
        assert "Financial Management" in result.output

    def test_unknown_action(self):
        result = runner.invoke(app, ["rules", "explode"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output
