"""Unified theme system for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.table import Table
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"

    PRIMARY = "cyan"
    SECONDARY = "blue"
    ACCENT = "magenta"
    MUTED = "dim"

    HEADER = "bold cyan"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    BUILD = "🔨"
    CONFIG = "⚙️"

    # Text fallbacks for emoji-disabled mode
    _TEXT_FALLBACKS = {
        "SUCCESS": "",
        "ERROR": "",
        "WARNING": "!",
        "INFO": "i",
        "BUILD": "",
        "CONFIG": "",
    }

    @classmethod
    def get_icon(cls, icon_name: str, icon_mode: str = "emoji") -> str:
        """Get icon based on the specified mode.

        Args:
            icon_name: Name of the icon (e.g., "SUCCESS", "ERROR")
            icon_mode: Icon mode - "emoji" or "text"

        Returns:
            The appropriate icon based on mode
        """
        if icon_mode == "emoji":
            return getattr(cls, icon_name, "")
        return cls._TEXT_FALLBACKS.get(icon_name, f"[{icon_name}]")

    @classmethod
    def format_with_icon(cls, icon_name: str, text: str, icon_mode: str = "emoji") -> str:
        """Format text with icon, handling empty icons gracefully."""
        icon = cls.get_icon(icon_name, icon_mode)
        return f"{icon} {text}" if icon else text


MAPSCOPE_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "secondary": Colors.SECONDARY,
        "accent": Colors.ACCENT,
        "muted": Colors.MUTED,
        "header": Colors.HEADER,
    }
)


class ThemedConsole:
    """Console wrapper with Mapscope theme applied.

    Messages go to stderr so command results on stdout can be piped.
    """

    def __init__(self, icon_mode: str = "emoji", stderr: bool = True) -> None:
        self.console = Console(theme=MAPSCOPE_THEME, stderr=stderr)
        self.icon_mode = icon_mode

    def print_error(self, message: str) -> None:
        """Print error message with icon and styling."""
        self.console.print(
            Icons.format_with_icon("ERROR", message, self.icon_mode), style="error"
        )

    def print_warning(self, message: str) -> None:
        """Print warning message with icon and styling."""
        self.console.print(
            Icons.format_with_icon("WARNING", message, self.icon_mode), style="warning"
        )

    def print_info(self, message: str) -> None:
        """Print info message with icon and styling."""
        self.console.print(
            Icons.format_with_icon("INFO", message, self.icon_mode), style="info"
        )


class TableStyles:
    """Predefined table styling templates."""

    @staticmethod
    def create_basic_table(
        title: str = "", icon: str = "", icon_mode: str = "emoji"
    ) -> Table:
        """Create a basic styled table."""
        full_title = Icons.format_with_icon(icon, title, icon_mode) if icon else title
        return Table(
            title=full_title,
            show_header=True,
            header_style=Colors.HEADER,
            border_style=Colors.SECONDARY,
        )

    @staticmethod
    def create_candidate_table(icon_mode: str = "emoji") -> Table:
        """Create table for build artifact candidates."""
        table = TableStyles.create_basic_table("Build Artifacts", "BUILD", icon_mode)
        table.add_column("#", style=Colors.ACCENT, justify="right", no_wrap=True)
        table.add_column("Name", style=Colors.PRIMARY, no_wrap=True)
        table.add_column("Folder", style="bold")
        table.add_column("Binary", style=Colors.MUTED)
        table.add_column("Map", style=Colors.MUTED)
        return table

    @staticmethod
    def create_config_table(icon_mode: str = "emoji") -> Table:
        """Create table for configuration display."""
        table = TableStyles.create_basic_table("Configuration", "CONFIG", icon_mode)
        table.add_column("Setting", style=Colors.PRIMARY, no_wrap=True)
        table.add_column("Value", style="bold")
        return table


def get_themed_console(icon_mode: str = "emoji") -> ThemedConsole:
    """Get a themed console instance.

    Args:
        icon_mode: Icon mode - "emoji" or "text"

    Returns:
        Configured ThemedConsole instance
    """
    return ThemedConsole(icon_mode=icon_mode)
