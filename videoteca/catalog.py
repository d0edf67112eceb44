"""The video catalog: loading from CSV, searching and filtering."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

from .models import Episode, Movie, Series, Video


class CatalogError(Exception):
    """Raised when catalog data cannot be read or a row is malformed."""


def _split_cells(line: str) -> list[str]:
    """Split a CSV line on commas; a trailing separator yields no empty cell."""
    cells = line.split(",")
    if cells and cells[-1] == "":
        cells.pop()
    return cells


class Catalog:
    """An ordered collection of movies and series."""

    def __init__(self) -> None:
        self._videos: list[Video] = []

    def __len__(self) -> int:
        return len(self._videos)

    def __iter__(self) -> Iterator[Video]:
        return iter(self._videos)

    @property
    def videos(self) -> tuple[Video, ...]:
        return tuple(self._videos)

    def load_csv(self, path: str | os.PathLike) -> int:
        """Load a CSV file with a header line; return the number of rows read."""
        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Error al abrir el archivo: {path}") from exc
        with handle:
            return self.load_lines(handle)

    def load_lines(self, lines: Iterable[str]) -> int:
        """Load rows from lines whose first entry is a header.

        Rows of four cells are movies; rows of six cells are episodes, grouped
        into a series by id. Rows read before a malformed one stay loaded.
        """
        iterator = iter(lines)
        if next(iterator, None) is None:
            raise CatalogError("El archivo no tiene header")
        count = 0
        for raw in iterator:
            self._add_row(raw.removesuffix("\n"))
            count += 1
        return count

    def _add_row(self, line: str) -> None:
        cells = _split_cells(line)
        error = CatalogError(f"Error en la linea: {line}")
        if len(cells) not in (4, 6) or any(not cell for cell in cells):
            raise error
        try:
            if len(cells) == 4:
                self._videos.append(Movie.from_row(cells))
                return
            episode = Episode.from_row(cells)
            series = self.find(cells[0])
            if series is None:
                series = Series.from_row(cells)
                self._videos.append(series)
            elif not isinstance(series, Series):
                raise error
            series.add_episode(episode)
        except ValueError as exc:
            raise error from exc

    def find(self, name_or_id: str) -> Video | None:
        """First video whose name or id equals ``name_or_id``."""
        return next(
            (v for v in self._videos if name_or_id in (v.name, v.id)),
            None,
        )

    def find_rated(self, min_rating: float, series: bool) -> Video | None:
        """First series (or movie) rated at least ``min_rating``."""
        return next(
            (
                v
                for v in self._videos
                if v.rating >= min_rating and v.is_series == series
            ),
            None,
        )

    def filter_by_rating(
        self, min_rating: float, series: bool | None = None
    ) -> list[Video]:
        """Videos rated at least ``min_rating``, optionally only series or movies."""
        return [
            v
            for v in self._videos
            if v.rating >= min_rating and (series is None or v.is_series == series)
        ]

    def filter_by_genre(self, genre: str) -> list[Video]:
        """Videos whose genre equals ``genre`` exactly."""
        return [v for v in self._videos if v.genre == genre]