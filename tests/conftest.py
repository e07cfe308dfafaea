"""Shared test fixtures for Founder Pulse tests."""

import random

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from pulse.assessment.models import ScoreVector
from pulse.journal.models import JournalEntry


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def other_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() and aggregate() return cursors synchronously (not
    # coroutines), so use MagicMock for them. Async methods like find_one,
    # insert_one, find_one_and_update etc. stay as AsyncMock.
    collection.find = MagicMock()
    collection.aggregate = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def make_cursor():
    """Build a Motor-like cursor whose chained calls return itself."""
    def _make(docs):
        cursor = MagicMock()
        cursor.sort = MagicMock(return_value=cursor)
        cursor.limit = MagicMock(return_value=cursor)
        cursor.skip = MagicMock(return_value=cursor)
        cursor.to_list = AsyncMock(return_value=docs)
        return cursor
    return _make


@pytest.fixture
def balanced_profile():
    return ScoreVector(
        imposterSyndrome=50,
        founderDoubt=50,
        identityFusion=50,
        fearOfRejection=50,
        riskTolerance=50,
        isolationLevel=50,
        motivationType="mixed",
    )


@pytest.fixture
def strained_profile():
    return ScoreVector(
        imposterSyndrome=80,
        founderDoubt=85,
        identityFusion=90,
        fearOfRejection=75,
        riskTolerance=40,
        isolationLevel=88,
        motivationType="extrinsic",
    )


@pytest.fixture
def make_entry(sample_user_id):
    def _make(date, mood=50, energy=50, stress=50, notes=None, entry_id=None):
        return JournalEntry(
            id=entry_id or str(ObjectId()),
            userId=sample_user_id,
            date=date,
            mood=mood,
            energy=energy,
            stress=stress,
            notes=notes,
        )
    return _make


@pytest.fixture
def now():
    return datetime.now(timezone.utc)


@pytest.fixture
def random_profiles():
    """Seeded generator of arbitrary ScoreVectors for property sweeps."""
    def _make(count, seed=1234):
        rng = random.Random(seed)
        return [
            ScoreVector(
                imposterSyndrome=rng.randint(0, 100),
                founderDoubt=rng.randint(0, 100),
                identityFusion=rng.randint(0, 100),
                fearOfRejection=rng.randint(0, 100),
                riskTolerance=rng.randint(0, 100),
                isolationLevel=rng.randint(0, 100),
                motivationType=rng.choice(("intrinsic", "extrinsic", "mixed")),
            )
            for _ in range(count)
        ]
    return _make
