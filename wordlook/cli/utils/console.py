"""Rich console configuration and helpers."""

from rich.console import Console
from rich.theme import Theme

# Colour roles for lookup output
custom_theme = Theme(
    {
        "error": "red bold",
        "index": "cyan bold",
        "pos": "bright_magenta",
        "example": "green italic",
        "missing": "red italic",
        "phonetic": "bright_yellow",
        "synonym": "cyan",
        "antonym": "magenta",
        "word": "bold",
    }
)

# Main console for output
console = Console(theme=custom_theme, highlight=False)

# Error console for stderr
error_console = Console(theme=custom_theme, stderr=True, highlight=False)
