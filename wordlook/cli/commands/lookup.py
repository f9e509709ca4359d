"""Word lookup command."""

import asyncio
import logging

import typer
from rich.text import Text

from wordlook.cli.presenter import DisplayOptions, render
from wordlook.cli.utils.console import console, error_console
from wordlook.config import settings
from wordlook.exceptions import WordlookError
from wordlook.logging_config import setup_logging
from wordlook.services.dictionary import WordInfoService, create_backend

logger = logging.getLogger(__name__)


def lookup(
    word: str | None = typer.Argument(None, help="The word to see definitions for"),
    use_key: str | None = typer.Option(
        None, "--use-key", help="Override the API key in WORDNIK_API_KEY / WORDSAPI_KEY"
    ),
    random: bool = typer.Option(False, "--random", "-r", help="Search for a random word"),
    wotd: bool = typer.Option(False, "--wotd", help="Look up the word of the day"),
    max_definitions: int = typer.Option(
        10, "--max", min=1, help="The maximum number of definitions to display"
    ),
    no_colour: bool = typer.Option(False, "--no-colour", help="Disable coloured output"),
    phonetics: bool = typer.Option(False, "--phonetics", "-p", help="Display the phonetics"),
    examples: bool = typer.Option(False, "--examples", "-e", help="Show example usage"),
    synonyms: bool = typer.Option(False, "--synonyms", "-s", help="Show synonyms"),
    antonyms: bool = typer.Option(False, "--antonyms", "-a", help="Show antonyms"),
    syllables: bool = typer.Option(False, "--syllables", help="Show the syllable breakdown"),
    no_types: bool = typer.Option(False, "--no-types", help="Hide parts of speech"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show examples, phonetics, synonyms and antonyms"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output all data as JSON"),
    provider: str | None = typer.Option(
        None, "--provider", help="wordnik, wordsapi or freedictionary"
    ),
) -> None:
    """Look up a word in an online dictionary."""
    setup_logging()

    options = DisplayOptions(
        max=max_definitions,
        show_examples=examples,
        show_phonetics=phonetics,
        show_synonyms=synonyms,
        show_antonyms=antonyms,
        show_syllables=syllables,
        no_types=no_types,
        verbose=verbose,
    )
    asyncio.run(
        _lookup(
            word,
            options,
            provider=provider or settings.dictionary_provider,
            api_key=use_key,
            random=random,
            wotd=wotd,
            json_output=json_output,
            colour=not no_colour,
        )
    )


async def _lookup(
    word: str | None,
    options: DisplayOptions,
    provider: str,
    api_key: str | None = None,
    random: bool = False,
    wotd: bool = False,
    json_output: bool = False,
    colour: bool = True,
) -> None:
    """Async implementation of the lookup command."""
    try:
        service = WordInfoService(create_backend(provider, api_key))
        resolved = await service.resolve_word(word, random=random, word_of_the_day=wotd)
        info = await service.fetch(resolved)
    except WordlookError as e:
        logger.debug(f"Lookup failed: {e!r}")
        error_console.print(
            f"Error: {e}",
            style="error" if colour else "",
            markup=False,
            emoji=False,
            soft_wrap=True,
        )
        raise typer.Exit(1) from None

    if json_output:
        console.print_json(data=info.to_dict(), highlight=colour)
        return

    if random or wotd:
        console.print(Text(info.word, style="word" if colour else ""))
        console.print()

    for line in render(info, options, colour=colour):
        console.print(line, soft_wrap=True)
