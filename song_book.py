"""
In-memory song book for the karaoke machine.

Songs are kept in the order they were added. Artist grouping is computed
from that list on every query, so it always reflects the current contents.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Song:
    artist: str
    title: str
    video_url: str

    def __str__(self):
        return f"Song: {self.title} by {self.artist}"


class SongBook:
    def __init__(self):
        self._songs: List[Song] = []

    def __len__(self):
        return len(self._songs)

    def add_song(self, song: Song) -> None:
        self._songs.append(song)

    def song_count(self) -> int:
        return len(self._songs)

    def get_artists(self) -> List[str]:
        """Return each distinct artist once, sorted by name"""
        return sorted({song.artist for song in self._songs})

    def get_songs_for_artist(self, artist: str) -> List[Song]:
        """Return the artist's songs in the order they were added

        Matching is exact and case-sensitive. An unknown artist gives an
        empty list.
        """
        return [song for song in self._songs if song.artist == artist]
