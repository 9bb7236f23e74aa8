"""A doubly linked playlist of songs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(eq=False)
class Song:
    """A song linked to its neighbours in a playlist."""

    title: str
    author: str
    year: int
    previous: Song | None = field(default=None, repr=False)
    next: Song | None = field(default=None, repr=False)


class Playlist:
    """Songs kept in order, each linked to the one before and after it."""

    def __init__(self, songs: Iterable[Song] = ()) -> None:
        self.head: Song | None = None
        self.tail: Song | None = None
        self._size = 0
        for song in songs:
            self.append(song)

    def append(self, song: Song) -> None:
        """Link ``song`` after the current last song."""
        if song.previous is not None or song.next is not None or song is self.head:
            raise ValueError(f"song {song.title!r} is already linked")
        song.previous = self.tail
        song.next = None
        if self.tail is None:
            self.head = song
        else:
            self.tail.next = song
        self.tail = song
        self._size += 1

    def __iter__(self) -> Iterator[Song]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __reversed__(self) -> Iterator[Song]:
        node = self.tail
        while node is not None:
            yield node
            node = node.previous

    def __len__(self) -> int:
        return self._size


def sample_playlist() -> Playlist:
    """The five-song example playlist."""
    return Playlist(
        [
            Song("Aquarela", "Toquinho", 1983),
            Song("Romaria", "Renato Teixeira", 1978),
            Song("Eu nasci há dez mil anos atrás", "Raul Seixas", 1976),
            Song("Cálice", "Chico Buarque e Gilberto Gil", 1978),
            Song("Tempo perdido", "Renato Russo", 1986),
        ]
    )