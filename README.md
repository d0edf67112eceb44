# videoteca

A small catalogue of movies and series. Videos are loaded from a CSV file.
You can then rate them and list them by rating, by genre or by type.

## Installing

```
pip install .
```

## Running

```
videoteca
```

The command takes no options besides `--help`. It opens a text menu (in
Spanish) on the terminal:

1. Load the data file. The file is always `./series.csv` in the current
   directory.
2. Show videos by minimum rating or by genre (Drama, Accion, Misterio).
3. Show the first series rated at or above a given score, with its episodes.
4. Show movies rated at or above a given score.
5. Rate a video by its id or name.
0. Quit. The menu also ends when input runs out.

Scores must be above 0 and at most 5.0. Each video keeps the running average
of the scores it has been given; a video that was never rated has a rating
of 0. The screen is cleared between menus only when output goes to a
terminal.

## CSV format

The first line is a header and is skipped. The fields of every other line are
separated by commas (a single trailing comma is ignored).

- A line with 4 fields is a movie: `id,name,duration,genre`
- A line with 6 fields is an episode:
  `id,name,duration,genre,episode,season`. Episodes that share an id belong
  to the same series. The series is created from its first episode.

The duration must be a positive whole number. Loading stops with an error at
the first line that has an empty field, the wrong number of fields, a bad
duration, or an episode whose id belongs to a movie. Lines read before it
stay in the catalogue.

## Using it from Python

```python
from videoteca.catalog import Catalog, CatalogError

catalog = Catalog()
try:
    rows = catalog.load_csv("series.csv")   # number of data lines read
except CatalogError as exc:
    print(exc)

video = catalog.find("Breaking Bad")        # by name or id; None if absent
if video is not None:
    video.rate(4.5)

for v in catalog.filter_by_rating(4.0, series=True):
    print(v.describe())

for v in catalog.filter_by_genre("Drama"):
    print(v.describe())
```

- `Catalog.load_lines` takes any iterable of lines (header first) instead of
  a path. A missing file, an empty file or a malformed line raises
  `CatalogError`.
- `Catalog.find_rated(min_rating, series)` returns the first series (or
  movie) rated at least `min_rating`, or `None`.
- `Catalog.filter_by_rating(min_rating, series=None)` lists videos rated at
  least `min_rating`; pass `True` or `False` to keep only series or movies.
- A `Catalog` can be iterated and has a length; `Catalog.videos` is a tuple
  of its entries in load order.
- `videoteca.models` holds `Movie`, `Series` and `Episode`. `Series` keeps
  its episodes in `episodes`, and `Series.describe_episodes()` returns one
  line per episode.
- `videoteca.cli.run(catalog, stdin, stdout)` drives the menu over any text
  streams.

## What it does not do

The catalogue lives in memory only. Ratings are not written back to the CSV
file or saved anywhere, and they are lost when the program ends. The menu
cannot load a file other than `./series.csv`; use `Catalog.load_csv` for
that. Videos cannot be added, edited or removed except by loading a file.