"""Turn a WordInfo into terminal lines."""

from dataclasses import dataclass

from rich.text import Text

from wordlook.models import WordInfo


@dataclass
class DisplayOptions:
    """Which parts of a lookup to show."""

    max: int | None = None  # None renders every definition
    show_examples: bool = False
    show_phonetics: bool = False
    show_synonyms: bool = False
    show_antonyms: bool = False
    show_syllables: bool = False
    no_types: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.verbose:
            self.show_examples = True
            self.show_phonetics = True
            self.show_synonyms = True
            self.show_antonyms = True


def _line(text: str, style: str, colour: bool) -> Text:
    return Text(text, style=style if colour else "")


def _missing(what: str, colour: bool) -> Text:
    return _line(f"[No {what} available]", "missing", colour)


def _word_list(label: str, words: list[str], style: str, colour: bool) -> Text:
    if not words:
        return _missing(label.lower(), colour)
    return _line(f"{label}: {', '.join(words)}", style, colour)


def render(info: WordInfo, options: DisplayOptions, colour: bool = True) -> list[Text]:
    """
    Render a lookup as a list of lines.

    Definitions without text are skipped before the max cap, and numbering
    starts at 1 after the cap. Colour only adds styles; the lines are the same
    either way.
    """
    lines: list[Text] = []

    if options.show_phonetics:
        if info.pronunciations:
            lines.append(_line(", ".join(info.pronunciations), "phonetic", colour))
        else:
            lines.append(_missing("phonetics", colour))
        lines.append(Text())

    if options.show_syllables:
        if info.syllables:
            syllables = "·".join(syllable.text for syllable in info.syllables)
            lines.append(_line(f"Syllables: {syllables}", "phonetic", colour))
        else:
            lines.append(_missing("syllables", colour))
        lines.append(Text())

    definitions = [definition for definition in info.definitions if definition.text]
    if options.max is not None:
        definitions = definitions[: options.max]

    if not definitions:
        lines.append(_missing("definitions", colour))

    for index, definition in enumerate(definitions, start=1):
        line = Text()
        line.append(f"{index}.", style="index" if colour else "")
        line.append(" ")
        if not options.no_types:
            line.append(definition.part_of_speech, style="pos" if colour else "")
            line.append(" - ")
        line.append(definition.text or "")
        lines.append(line)

        if options.show_examples:
            example = definition.top_example
            if example:
                lines.append(_line(f"e.g: {example}", "example", colour))
            else:
                lines.append(_line("[No example]", "missing", colour))

    if options.show_synonyms or options.show_antonyms:
        lines.append(Text())
        if options.show_synonyms:
            lines.append(_word_list("Synonyms", info.synonyms, "synonym", colour))
        if options.show_antonyms:
            lines.append(_word_list("Antonyms", info.antonyms, "antonym", colour))

    return lines
