import pytest

from videoteca.catalog import Catalog, CatalogError
from videoteca.models import Movie, Series

HEADER = "id,nombre,duracion,genero,episodio,temporada\n"
ROWS = [
    "M1,Matrix,136,Accion\n",
    "S1,Dark,60,Misterio,Secretos,1\n",
    "M2,Titanic,195,Drama\n",
    "S1,Dark,60,Misterio,Mentiras,1\n",
    "S2,Lost,45,Drama,Piloto,1\n",
]


@pytest.fixture
def catalog():
    result = Catalog()
    result.load_lines([HEADER, *ROWS])
    return result


def test_load_lines_groups_episodes(catalog):
    assert len(catalog) == 4
    assert [v.id for v in catalog] == ["M1", "S1", "M2", "S2"]
    dark = catalog.find("S1")
    assert isinstance(dark, Series)
    assert [e.title for e in dark.episodes] == ["Secretos", "Mentiras"]


def test_load_lines_returns_row_count():
    assert Catalog().load_lines([HEADER, *ROWS]) == len(ROWS)


def test_load_csv(tmp_path):
    path = tmp_path / "videos.csv"
    path.write_text(HEADER + "".join(ROWS), encoding="utf-8")
    catalog = Catalog()
    assert catalog.load_csv(path) == len(ROWS)
    assert len(catalog) == 4
    assert isinstance(catalog.find("Matrix"), Movie)


def test_load_csv_missing_file(tmp_path):
    missing = tmp_path / "missing.csv"
    with pytest.raises(CatalogError, match="Error al abrir el archivo"):
        Catalog().load_csv(missing)


def test_load_csv_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CatalogError, match="El archivo no tiene header"):
        Catalog().load_csv(path)


def test_header_only_loads_nothing():
    catalog = Catalog()
    assert catalog.load_lines([HEADER]) == 0
    assert len(catalog) == 0


@pytest.mark.parametrize(
    "line",
    [
        "M1,Matrix,136\n",
        "M1,Matrix,136,Accion,extra\n",
        "M1,,136,Accion\n",
        "\n",
        "S1,Dark,60,Misterio,,1\n",
    ],
)
def test_malformed_line(line):
    with pytest.raises(CatalogError, match="Error en la linea"):
        Catalog().load_lines([HEADER, line])


def test_invalid_duration_is_catalog_error():
    with pytest.raises(CatalogError, match="Error en la linea: M1,Matrix,0,Accion"):
        Catalog().load_lines([HEADER, "M1,Matrix,0,Accion\n"])


def test_rows_before_error_stay_loaded():
    catalog = Catalog()
    with pytest.raises(CatalogError):
        catalog.load_lines([HEADER, ROWS[0], "bad\n", ROWS[2]])
    assert [v.id for v in catalog] == ["M1"]


def test_trailing_comma_adds_no_cell():
    catalog = Catalog()
    catalog.load_lines([HEADER, "M1,Matrix,136,Accion,\n"])
    assert catalog.find("M1").genre == "Accion"


def test_episode_for_movie_id_is_error(catalog):
    with pytest.raises(CatalogError):
        catalog.load_lines([HEADER, "M1,Matrix,136,Accion,Piloto,1\n"])


def test_find_by_name_and_id(catalog):
    assert catalog.find("Titanic") is catalog.find("M2")
    assert catalog.find("Nada") is None


def test_find_rated(catalog):
    assert catalog.find_rated(1.0, True) is None
    catalog.find("S2").rate(4.0)
    catalog.find("M1").rate(5.0)
    assert catalog.find_rated(3.0, True) is catalog.find("S2")
    assert catalog.find_rated(3.0, False) is catalog.find("M1")


def test_find_rated_zero_returns_first_of_kind(catalog):
    assert catalog.find_rated(0.0, True) is catalog.find("S1")
    assert catalog.find_rated(0.0, False) is catalog.find("M1")


def test_filter_by_rating(catalog):
    catalog.find("M1").rate(5.0)
    catalog.find("S1").rate(4.0)
    catalog.find("M2").rate(2.0)
    assert [v.id for v in catalog.filter_by_rating(3.0)] == ["M1", "S1"]
    assert [v.id for v in catalog.filter_by_rating(3.0, True)] == ["S1"]
    assert [v.id for v in catalog.filter_by_rating(3.0, False)] == ["M1"]
    assert catalog.filter_by_rating(5.5) == []


def test_filter_by_rating_results_meet_threshold(catalog):
    for video, score in zip(catalog, (1.0, 2.5, 4.0, 5.0)):
        video.rate(score)
    for threshold in (0.0, 2.5, 4.5):
        found = catalog.filter_by_rating(threshold)
        assert all(v.rating >= threshold for v in found)
        assert len(found) == sum(v.rating >= threshold for v in catalog)


def test_filter_by_genre(catalog):
    assert [v.id for v in catalog.filter_by_genre("Drama")] == ["M2", "S2"]
    assert catalog.filter_by_genre("drama") == []


def test_videos_is_a_snapshot(catalog):
    snapshot = catalog.videos
    catalog.load_lines([HEADER, "M3,Alien,117,Misterio\n"])
    assert len(snapshot) == 4
    assert len(catalog.videos) == 5