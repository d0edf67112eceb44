"""Catalog entries: movies, series and the episodes that belong to series."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _format_number(value: float) -> str:
    """Render a number with six significant digits and no trailing zeros."""
    return f"{value:.6g}"


@dataclass
class Episode:
    """A single episode of a series."""

    title: str
    season: str

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Episode:
        """Build an episode from a six-column row (title and season are the last two)."""
        if len(row) < 6 or not row[4] or not row[5]:
            raise ValueError("Faltan datos - Episodio")
        return cls(title=row[4], season=row[5])

    def describe(self) -> str:
        return f"Episodio: {self.title} | Temporada: {self.season}"


def _video_fields(row: Sequence[str], kind: str) -> dict:
    """Validate the four leading columns shared by movies and series."""
    error = ValueError(f"Faltan datos - {kind}")
    if len(row) < 4 or not row[0] or not row[1]:
        raise error
    try:
        duration = _parse_int(row[2])
    except ValueError as exc:
        raise error from exc
    if duration <= 0 or not row[3]:
        raise error
    return {"id": row[0], "name": row[1], "duration": duration, "genre": row[3]}


@dataclass
class Video(ABC):
    """Common data of everything in the catalog."""

    id: str
    name: str
    duration: int
    genre: str
    rating: float = 0.0
    times_rated: int = 0

    is_series: ClassVar[bool] = False

    def rate(self, score: float) -> None:
        """Fold a new score into the running average rating."""
        self.rating = (self.rating * self.times_rated + score) / (self.times_rated + 1)
        self.times_rated += 1

    def _summary(self) -> str:
        return (
            f"{self.id} | {self.name} | Duacion:{self.duration}"
            f" | Genero: {self.genre}"
            f" | Calificacion: {_format_number(self.rating)}"
        )

    @abstractmethod
    def describe(self) -> str:
        """One-line description of the video."""


@dataclass
class Movie(Video):
    """A stand-alone movie."""

    is_series: ClassVar[bool] = False

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Movie:
        """Build a movie from a row of id, name, duration and genre."""
        return cls(**_video_fields(row, "Pelicula"))

    def describe(self) -> str:
        return self._summary()


@dataclass
class Series(Video):
    """A series holding its episodes in insertion order."""

    episodes: list[Episode] = field(default_factory=list)

    is_series: ClassVar[bool] = True

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Series:
        """Build a series (without episodes) from the leading columns of a row."""
        return cls(**_video_fields(row, "Serie"))

    def add_episode(self, episode: Episode) -> None:
        self.episodes.append(episode)

    @property
    def episode_count(self) -> int:
        return len(self.episodes)

    def describe(self) -> str:
        return f"{self._summary()} | Episodios: {len(self.episodes)}"

    def describe_episodes(self) -> str:
        """One line per episode, or a notice when there are none."""
        if not self.episodes:
            return "Ningún episodio encontrado"
        return "\n".join(episode.describe() for episode in self.episodes)