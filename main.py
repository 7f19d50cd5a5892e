"""
Karaoke Machine

Main entry point for the application. Launches the interactive menu.
"""

import sys

import cli_menu
import reader
from logger import setup_logging
from song_book import SongBook


def main():
    try:
        settings = reader.get_settings()
    except reader.SettingsError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    setup_logging(settings["log_level"])

    machine = cli_menu.KaraokeMachine(
        SongBook(),
        screen_width=settings["screen_width"],
        suggest_commands=settings["suggest_commands"],
    )
    machine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
