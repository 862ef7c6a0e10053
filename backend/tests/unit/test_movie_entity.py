"""Unit tests for the Movie domain entity."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.entities import Movie, MovieType


def _movie(**overrides) -> Movie:
    now = datetime.now(timezone.utc)
    fields = dict(
        id="6f1c2d4e-8a5b-4c3d-9e2f-1a2b3c4d5e6f",
        title="Arrival",
        type=MovieType.MOVIE,
        director="Denis Villeneuve",
        budget="$47M",
        location="Montreal",
        duration="116 min",
        year_time="2016",
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Movie(**fields)


def test_update_merges_supplied_fields_only():
    movie = _movie()
    movie.update(budget="$50M", type=MovieType.TV_SHOW)

    assert movie.budget == "$50M"
    assert movie.type is MovieType.TV_SHOW
    assert movie.title == "Arrival"
    assert movie.year_time == "2016"


def test_update_refreshes_updated_at_but_not_created_at():
    movie = _movie()
    created = movie.created_at

    movie.update(title="Arrival (Director's Cut)")

    assert movie.created_at == created
    assert movie.updated_at >= created


def test_update_never_moves_updated_at_backwards():
    future = datetime.now(timezone.utc) + timedelta(days=1)
    movie = _movie(updated_at=future)

    movie.update(location="Quebec")

    assert movie.updated_at == future


def test_update_rejects_store_owned_fields():
    movie = _movie()
    with pytest.raises(AttributeError):
        movie.update(id="something-else")
    assert movie.id == "6f1c2d4e-8a5b-4c3d-9e2f-1a2b3c4d5e6f"


def test_movie_type_values_match_client_literals():
    assert MovieType("Movie") is MovieType.MOVIE
    assert MovieType("TV Show") is MovieType.TV_SHOW
