"""
cardforge Command Line Interface.

Provides commands for card extraction and rule set management.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

import typer
import yaml

from cardforge.config import ExtractionConfig, load_config
from cardforge.core.types import CardForgeError
from cardforge.extraction.engine import CardExtractor
from cardforge.rules import (
    RuleSet,
    RuleSetCache,
    YamlRuleStore,
    default_rule_set,
    read_rules_file,
    validate_rules,
)
from cardforge.sources import DocumentInput, load_document, sheets_as_text

app = typer.Typer(
    name="cardforge",
    help="Knowledge card extraction - turn documents into classified cards",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _rules_payload(path: Path):
    """Raw rules from a rules file or a rule store file (version + rules)."""
    data = read_rules_file(path)
    if isinstance(data, dict) and "rules" in data:
        return data["rules"]
    return data


def _resolve_rules(rules_path: Optional[str], config: ExtractionConfig) -> Union[RuleSet, RuleSetCache]:
    if rules_path:
        return RuleSet.from_dict(_rules_payload(Path(rules_path)))
    if config.rules_path:
        store = YamlRuleStore(config.rules_path)
        return RuleSetCache(store.load, ttl=config.rules_cache_ttl)
    return default_rule_set()


@app.command()
def extract(
    input_file: str = typer.Argument(..., help="Input document (txt, md, json, csv, png, jpg)"),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Rule set file (YAML or JSON)"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Extraction config (YAML)"),
    as_json: bool = typer.Option(False, "--json", help="Print cards as JSON"),
    as_text: bool = typer.Option(False, "--as-text", help="Send spreadsheet rows through text extraction"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Extract knowledge cards from a document.

    Example:
        cardforge extract notes.txt --json
        cardforge extract contacts.csv --as-text
    """
    _setup_logging(verbose)

    try:
        config = load_config(config_path)
        extractor = CardExtractor(_resolve_rules(rules, config), config)
        document = load_document(input_file)
        if as_text and document.is_tabular:
            document = DocumentInput.from_text(sheets_as_text(document.sheets), document.source)
        report = extractor.process(document, require_cards=True)
    except (CardForgeError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([card.to_dict() for card in report.cards], indent=2, ensure_ascii=False))
        return

    typer.secho(f"✓ {report.produced} cards from {report.source}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"Sections/rows considered: {report.considered} | skipped: {report.skipped}")
    for i, card in enumerate(report.cards, 1):
        typer.echo(f"\n{i}. {card.title}")
        typer.echo(f"   Type: {card.type.value} | Category: {card.category}")
        if card.tags:
            typer.echo(f"   Tags: {', '.join(card.tags)}")
        typer.echo(f"   Location: {card.provenance.location}")


@app.command()
def regenerate(
    snippet: str = typer.Argument(..., help="Text to rebuild a card from"),
    source: str = typer.Option("regenerated", "--source", "-s", help="Source name for the card"),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Rule set file (YAML or JSON)"),
):
    """Rebuild a single card from a text snippet."""
    try:
        rule_set = RuleSet.from_dict(_rules_payload(Path(rules))) if rules else None
        card = CardExtractor(rule_set).regenerate(snippet, source=source)
    except (CardForgeError, FileNotFoundError, yaml.YAMLError) as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(card.to_dict(), indent=2, ensure_ascii=False))


@app.command("rules")
def rules_command(
    action: str = typer.Argument(..., help="Action: validate, show, update, reset"),
    path: Optional[str] = typer.Argument(None, help="Rule set file (for 'validate' and 'update')"),
    store: Optional[str] = typer.Option(None, "--store", help="Rule store file (YAML)"),
):
    """
    Manage classification rules.

    Actions:
        validate - Check a rule set file
        show     - Print the active rule set
        update   - Store a new rule set (version is incremented)
        reset    - Restore the built-in rules

    Examples:
        cardforge rules validate my_rules.yaml
        cardforge rules update my_rules.yaml --store config/rules.yaml
        cardforge rules show --store config/rules.yaml
    """
    if action in ("validate", "update") and not path:
        typer.secho(f"Error: path required for '{action}' action", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if action in ("update", "reset") and not store:
        typer.secho(f"Error: --store required for '{action}' action", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        if action == "validate":
            result = validate_rules(_rules_payload(Path(path)))
            if not result.is_valid:
                typer.secho(f"✗ {result.summary}", fg=typer.colors.RED, err=True)
                for error in result.errors:
                    typer.secho(f"  ✗ {error}", fg=typer.colors.RED, err=True)
                raise typer.Exit(code=1)
            typer.secho(f"✓ {result.summary}", fg=typer.colors.GREEN)
            for key, value in result.sanitized.summary().items():
                if key != "version":
                    typer.echo(f"  {key}: {value}")

        elif action == "show":
            rule_set = (YamlRuleStore(store).load() if store else None) or default_rule_set()
            typer.echo(f"# version {rule_set.version}")
            typer.echo(yaml.safe_dump(rule_set.to_dict(), sort_keys=False, allow_unicode=True, indent=2))

        elif action == "update":
            rule_set = YamlRuleStore(store).save(_rules_payload(Path(path)))
            typer.secho(f"✓ Rule set stored (version {rule_set.version})", fg=typer.colors.GREEN)

        elif action == "reset":
            rule_set = YamlRuleStore(store).reset()
            typer.secho(f"✓ Rule set reset to defaults (version {rule_set.version})", fg=typer.colors.GREEN)

        else:
            typer.secho(f"Unknown action: {action}", fg=typer.colors.RED, err=True)
            typer.echo("Valid actions: validate, show, update, reset")
            raise typer.Exit(code=1)

    except CardForgeError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except (FileNotFoundError, yaml.YAMLError) as e:
        typer.secho(f"✗ Could not read rules: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
