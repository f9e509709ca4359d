"""Main CLI application entry point."""

import typer

from wordlook.cli.commands import lookup

app = typer.Typer(
    name="wordlook",
    help="Look up definitions, phonetics and related words from online dictionaries",
    rich_markup_mode="rich",
)

# Single command: invoked as `wordlook WORD [OPTIONS]`
app.command(name="lookup")(lookup.lookup)


if __name__ == "__main__":
    app()
