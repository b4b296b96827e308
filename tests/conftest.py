"""
Shared pytest fixtures for container tests.
"""

from dataclasses import dataclass

import pytest

from ordseq import DynamicArraySequence, LinkedSequence


@dataclass(frozen=True)
class Person:
    """Example record with two orderable fields."""

    age: int
    name: str


@pytest.fixture(params=[DynamicArraySequence, LinkedSequence], ids=["array", "linked"])
def sequence_type(request):
    """Provide each Sequence implementation in turn."""
    return request.param


@pytest.fixture
def linked():
    """Provide a LinkedSequence holding 1..6."""
    return LinkedSequence([1, 2, 3, 4, 5, 6])


@pytest.fixture
def people():
    """Provide sample records with duplicate ages."""
    return [
        Person(24, "Rayan"),
        Person(32, "Ravi"),
        Person(24, "Gaurav"),
        Person(24, "Anita"),
        Person(32, "Bob"),
    ]
