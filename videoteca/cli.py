"""Interactive menu for browsing, filtering and rating the video catalog."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Iterator, Optional, TextIO

from .catalog import Catalog, CatalogError
from .models import Series, Video

DATA_FILE = "./series.csv"
SEPARATOR = "—" * 65
GENRES = {1: "Drama", 2: "Accion", 3: "Misterio"}
RATING_RANGE_MESSAGE = "La calificación tiene que ser de: de 0-5.0"


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    if sys.platform == "win32":
        command = ["cmd", "/c", "cls"]
    elif sys.platform.startswith("linux") or sys.platform == "darwin":
        command = ["clear"]
    else:
        return
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _valid_rating(score: float) -> bool:
    return 0 < score <= 5


class _Session:
    """State of one interactive run: the catalog and the console streams."""

    def __init__(self, catalog: Catalog, stdin: TextIO, stdout: TextIO) -> None:
        self.catalog = catalog
        self.tokens = _tokens(stdin)
        self.out = stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def prompt(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def separator(self) -> None:
        self.say(SEPARATOR)

    def clear(self) -> None:
        isatty = getattr(self.out, "isatty", None)
        if callable(isatty) and isatty():
            self.out.flush()
            clear_screen()

    def read_word(self) -> Optional[str]:
        return next(self.tokens, None)

    def read_int(self) -> Optional[int]:
        """Next integer; None at end of input, -1 for an unreadable value."""
        word = self.read_word()
        if word is None:
            return None
        try:
            return int(word)
        except ValueError:
            return -1

    def read_float(self) -> float:
        word = self.read_word()
        if word is None:
            return 0.0
        try:
            return float(word)
        except ValueError:
            return 0.0

    def show(self, videos: list[Video], empty_message: str) -> None:
        if not videos:
            self.say(empty_message)
            return
        for video in videos:
            self.say(video.describe())

    # Menu actions

    def load_file(self) -> None:
        self.separator()
        self.prompt("Introduce la ruta del archivo a cargar: ")
        self.say()
        self.say(f"Cargando archivo: {DATA_FILE}")
        try:
            self.catalog.load_csv(DATA_FILE)
        except CatalogError as exc:
            print(exc, file=sys.stderr)
            self.say("Opps hubo un error")
        else:
            self.say(f"Archivo: {DATA_FILE} cargado con exito")

    def filter_menu(self) -> None:
        while True:
            self.separator()
            self.say("Filtrar por:")
            self.separator()
            self.say("1. Filtrar por calificacion")
            self.say("2. Filtrar por genero")
            self.say("0. Regresar")
            self.separator()
            self.prompt("Filtro: ")
            decision = self.read_int()
            if decision is None or decision == 0:
                return
            if decision == 1:
                self.filter_by_rating()
            elif decision == 2:
                self.filter_by_genre()
            else:
                self.say("Opción no válida")

    def filter_by_rating(self) -> None:
        self.clear()
        self.separator()
        self.prompt("Califación minima: ")
        score = self.read_float()
        self.separator()
        if score <= 0:
            self.say("Calificacion no válida")
            return
        if score > 5:
            self.say("La calificacion tiene que ser de: de 0-5.0")
            return
        self.show(self.catalog.filter_by_rating(score), "Ningun video encontrado")

    def filter_by_genre(self) -> None:
        self.clear()
        self.separator()
        self.say("Genero: ")
        self.separator()
        for number, name in GENRES.items():
            self.say(f"{number}. {name}")
        self.separator()
        self.prompt("Opcion: ")
        choice = self.read_int()
        self.separator()
        genre = GENRES.get(choice if choice is not None else 0, "")
        if not genre:
            self.say("Esta opción no existe")
        self.show(self.catalog.filter_by_genre(genre), "Ningun video encontrado")

    def show_episodes(self) -> None:
        self.separator()
        self.prompt("Calificación mínima: ")
        score = self.read_float()
        self.separator()
        if not _valid_rating(score):
            self.say(RATING_RANGE_MESSAGE)
            return
        series = self.catalog.find_rated(score, True)
        if not isinstance(series, Series):
            self.say("No se encontro niguna serie.")
            return
        self.say(series.describe())
        self.separator()
        self.say(series.describe_episodes())

    def show_movies(self) -> None:
        self.separator()
        self.prompt("Califación minima: ")
        score = self.read_float()
        self.separator()
        if not _valid_rating(score):
            self.say(RATING_RANGE_MESSAGE)
            return
        self.show(
            self.catalog.filter_by_rating(score, False), "Ninguna Pelicula encontrada"
        )

    def rate_video(self) -> None:
        self.separator()
        for video in self.catalog:
            self.say(video.describe())
        self.separator()
        self.prompt("Ingrese el id, o nombre de la serie: ")
        name_or_id = self.read_word()
        if not name_or_id:
            self.say("Titulo no válido")
            return
        self.separator()
        self.prompt("Calificación otorgada: ")
        score = self.read_float()
        if not _valid_rating(score):
            self.say(RATING_RANGE_MESSAGE)
            return
        self.separator()
        video = self.catalog.find(name_or_id)
        if video is None:
            self.say("No se eonctro el video a calificar:")
            return
        video.rate(score)
        self.say("Video calificado con éxito")

    def main_menu(self) -> None:
        self.clear()
        self.separator()
        self.say("Sistema Gestor de Videos")
        self.separator()
        actions = {
            1: self.load_file,
            2: self.filter_menu,
            3: self.show_episodes,
            4: self.show_movies,
            5: self.rate_video,
        }
        while True:
            self.separator()
            self.say("Menu:")
            self.separator()
            self.say("1. Cargar archivo de datos")
            self.say("2. Mostrar videos por calificacion o genero ")
            self.say(
                "3. Mostrar los episodios de una serie con una calificacion determinada"
            )
            self.say("4. Mostrar peliculas con cierta calificacion")
            self.say("5. Calificar un video")
            self.say("0. Salir")
            self.separator()
            self.prompt("Opcion: ")
            decision = self.read_int()
            if decision is None or decision == 0:
                return
            action = actions.get(decision)
            if action is None:
                self.say("Opción no valida")
                continue
            self.clear()
            action()


def run(catalog: Catalog, stdin: TextIO, stdout: TextIO) -> None:
    """Drive the menu over ``catalog`` until the user quits or input ends."""
    _Session(catalog, stdin, stdout).main_menu()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="videoteca",
        description="Sistema gestor de videos: peliculas y series.",
    )
    parser.parse_args(argv)
    run(Catalog(), sys.stdin, sys.stdout)
    return 0