"""Pytest fixtures for b64codec tests."""
import pytest
from Crypto.Random import get_random_bytes

from b64codec import STANDARD


@pytest.fixture
def random_payload():
    """Returns 1000 random bytes."""
    return get_random_bytes(1000)


@pytest.fixture
def random_payloads():
    """Returns random payloads covering every length from 0 to 48."""
    return [get_random_bytes(n) for n in range(49)]


@pytest.fixture
def reversed_alphabet_spec():
    """Returns the standard alphabet spelled backwards."""
    return STANDARD.symbols[::-1]
