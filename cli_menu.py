"""
CLI menu for the karaoke machine.

This module provides the interactive loop: adding songs to the song book,
choosing songs into the play queue, and playing the queue one song at a time.
"""

from collections import deque

import constants as cv
import search
from logger import get_logger
from song_book import Song

logger = get_logger(__name__)

COMMANDS = [command for command, _ in cv.MENU]


class KaraokeMachine:
    """Interactive session over a song book and a FIFO play queue.

    Args:
        song_book: SongBook shared for the life of the session
        read_line: Callable taking a prompt and returning one line of input
        write: Callable printing one line of output
        screen_width: Width of the rule printed above the menu
        suggest_commands: Offer a close command when the input is unknown
    """

    def __init__(
        self,
        song_book,
        read_line=input,
        write=print,
        screen_width=cv.SCREEN_WIDTH,
        suggest_commands=True,
    ):
        self.song_book = song_book
        self.song_queue = deque()
        self._read_line = read_line
        self._write = write
        self._screen_width = screen_width
        self._suggest_commands = suggest_commands

    def run(self):
        """Run the menu loop until the user quits or input runs out"""
        choice = ""
        while choice != "quit":
            try:
                choice = self._dispatch(self._prompt_action())
            except EOFError:
                logger.error("Input stream closed, ending session")
                self._write("\nNo more input. " + cv.FAREWELL)
                break
            except OSError as e:
                logger.exception("Problem with input")
                self._write(f"Problem with input: {e}")

    def _prompt_action(self):
        """Print the status line and menu, then read a raw command"""
        self._write("=" * self._screen_width)
        self._write(
            f"There are {self.song_book.song_count()} songs available "
            f"and {len(self.song_queue)} in the queue. Your options are"
        )
        for command, description in cv.MENU:
            self._write(f"{command} - {description}")
        return self._read_line(cv.ACTION_PROMPT)

    def _dispatch(self, user_input):
        """Route one command to its handler and return the normalized command"""
        choice = user_input.strip().lower()
        logger.debug("Command: %r", choice)

        if choice == "add":
            song = self.prompt_new_song()
            self.song_book.add_song(song)
            self._write(f"{song} added!\n")
        elif choice == "choose":
            self._handle_choose()
        elif choice == "play":
            self.play_next()
        elif choice == "quit":
            self._write(cv.FAREWELL)
        else:
            self._handle_unknown(user_input)
        return choice

    def prompt_new_song(self):
        """Ask for artist, title and video URL, taken as typed"""
        artist = self._read_line(cv.ARTIST_PROMPT)
        title = self._read_line(cv.TITLE_PROMPT)
        video_url = self._read_line(cv.VIDEO_URL_PROMPT)
        return Song(artist, title, video_url)

    def _handle_choose(self):
        if not self.song_book.song_count():
            self._write("\nNo songs in the song book yet. Use add to create some.")
            return

        artist = self.prompt_artist()
        if artist is None:
            return
        song = self.prompt_song_for_artist(artist)
        if song is None:
            return
        self.song_queue.append(song)
        self._write(f"You chose: {song}")

    def prompt_artist(self):
        """Let the user pick an artist; None if the selection was invalid"""
        self._write("Available artists:")
        artists = self.song_book.get_artists()
        return self._select(artists, artists)

    def prompt_song_for_artist(self, artist):
        """Let the user pick one of *artist*'s songs; None if invalid"""
        songs = self.song_book.get_songs_for_artist(artist)
        self._write(f"Available songs for {artist}:")
        return self._select(songs, [song.title for song in songs])

    def _select(self, items, labels):
        """Resolve a numbered pick from *labels* to the matching item"""
        index = self.prompt_for_index(labels)
        if index is None:
            return None
        if not 0 <= index < len(items):
            logger.debug("Selection %d out of range 1-%d", index + 1, len(items))
            self._write(f"Invalid choice. Enter 1-{len(items)}")
            return None
        return items[index]

    def prompt_for_index(self, options):
        """Number *options* from 1, read a choice and return it zero-based.

        The result is not range checked. Returns None when the input isn't
        a number.
        """
        for counter, option in enumerate(options, 1):
            self._write(f"{counter}.) {option}")

        option_as_string = self._read_line(cv.CHOICE_PROMPT)
        try:
            choice = int(option_as_string.strip())
        except ValueError:
            logger.debug("Selection %r is not a number", option_as_string)
            self._write(f"Invalid input: '{option_as_string}' is not a number")
            return None
        return choice - 1

    def play_next(self):
        """Pop the front of the queue and tell the user where to hear it"""
        if not self.song_queue:
            self._write(cv.EMPTY_QUEUE)
            return None

        song = self.song_queue.popleft()
        logger.debug("Playing %s", song)
        self._write(
            f"\n\n\nOpen {song.video_url} to hear {song.title} by {song.artist}\n\n"
        )
        return song

    def _handle_unknown(self, user_input):
        self._write(f"Unknown choice: '{user_input}'. Try again\n")
        if not self._suggest_commands:
            return
        suggestion = search.suggest_command(user_input, COMMANDS)
        if suggestion:
            self._write(f"Did you mean '{suggestion}'?")
