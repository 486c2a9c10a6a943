"""
Shared fixtures:
- the bundled definitions registry (built once per session)
- a serializer bound to it
- the known-answer transaction vectors from tests/golden
"""
import json
import pathlib

import pytest

from rippled_binary_codec import TransactionSerializer, get_default_registry

GOLDEN = pathlib.Path(__file__).parent / "golden"


@pytest.fixture(scope="session")
def registry():
    """The registry built from the packaged definitions.json."""
    return get_default_registry()


@pytest.fixture
def serializer(registry):
    return TransactionSerializer(registry)


@pytest.fixture(scope="session")
def tx_vectors():
    """Transactions with their expected signing serialization."""
    with open(GOLDEN / "tx_vectors.json", "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def offer_create(tx_vectors):
    """A signed OfferCreate with an issued TakerPays, as returned by rippled."""
    return dict(tx_vectors["offer_create"]["tx"])


@pytest.fixture
def payment(tx_vectors):
    """A signed native Payment."""
    return dict(tx_vectors["payment_native"]["tx"])
