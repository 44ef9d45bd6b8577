# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Spool-TUI configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spool-tui/  (default: ~/.config/spool-tui/)
#   - State:   $XDG_STATE_HOME/spool-tui/   (default: ~/.local/state/spool-tui/)
#
# Files:
#   - config.toml: User configuration (spool location, display preferences)
#   - spool-tui.log: Debug log (in state directory; the TUI owns the terminal)
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from spool_tui.spool import DEFAULT_MAIL_ROOT


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spool-tui"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Spool-TUI.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spool-tui/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for Spool-TUI.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/spool-tui/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class SpoolConfig:
    """
    Where to find mailboxes and how to read them.

    Attributes:
        root: The mail spool directory (one mbox file per user).
        exclude: User names to skip when browsing the whole spool.
        encoding: Text encoding of the mailbox files. Bytes that don't
                  decode are replaced, never fatal.
    """
    root: str = str(DEFAULT_MAIL_ROOT)
    exclude: list[str] = field(default_factory=list)
    encoding: str = "utf-8"


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        theme: Color theme ("dark" or "light").
        date_format: strftime format for the Date header. Dates that can't
                     be parsed are shown as written.
        show_headers: Extra headers shown above the body, besides From,
                      Subject and Date.
        render_html: Convert HTML bodies to text instead of showing markup.
    """
    theme: str = "dark"
    date_format: str = "%a %b %d %H:%M:%S %Y"
    show_headers: list[str] = field(default_factory=lambda: ["to", "cc"])
    render_html: bool = True


@dataclass
class Config:
    """
    Main configuration container for Spool-TUI.

    Usage:
        >>> config = Config.load()
        >>> config.spool.root
        '/var/mail'
    """
    spool: SpoolConfig = field(default_factory=SpoolConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the log file."""
        return get_xdg_state_home() / "spool-tui.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.

        Returns:
            The path written to.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        return config_path

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).
        """
        defaults = cls()

        spool = data.get("spool", {})
        ui = data.get("ui", {})
        if not isinstance(spool, dict) or not isinstance(ui, dict):
            raise ConfigError("[spool] and [ui] must be tables")

        config = cls(
            spool=SpoolConfig(
                root=str(spool.get("root", defaults.spool.root)),
                exclude=[str(user) for user in spool.get("exclude", [])],
                encoding=spool.get("encoding", defaults.spool.encoding),
            ),
            ui=UIConfig(
                theme=ui.get("theme", defaults.ui.theme),
                date_format=ui.get("date_format", defaults.ui.date_format),
                show_headers=[str(h) for h in ui.get("show_headers", defaults.ui.show_headers)],
                render_html=bool(ui.get("render_html", defaults.ui.render_html)),
            ),
        )

        if config.ui.theme not in ("dark", "light"):
            raise ConfigError(f"Unknown theme: {config.ui.theme!r}")

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "spool": {
                "root": self.spool.root,
                "exclude": list(self.spool.exclude),
                "encoding": self.spool.encoding,
            },
            "ui": {
                "theme": self.ui.theme,
                "date_format": self.ui.date_format,
                "show_headers": list(self.ui.show_headers),
                "render_html": self.ui.render_html,
            },
        }


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def configure_logging(debug: bool = False, log_file: Path | None = None) -> Path:
    """
    Send log records to the state-directory log file.

    The terminal belongs to the UI, so nothing is logged to stderr.

    Returns:
        The log file path.
    """
    log_file = log_file or Config.log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return log_file


def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config and logs are stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.log_file_path()}")
