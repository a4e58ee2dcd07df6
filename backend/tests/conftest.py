"""
Shared fixtures for the validator test suite.

The request input mirrors what the FastAPI adapter builds: the five
locations plus caller identity.
"""

import pytest

from infivalidator.validators import InfiValidator


@pytest.fixture
def request_input():
    """A request carrying valid and invalid values in params, body and query."""
    return {
        "params": {
            "userId": 1,
            "docId": "5e8703d290165868e8c2cd50",
            "wrongDocId": "5e8703d290165868e8c2cd50xxx",
            "firebaseDocId": "A1pE4Up36ORa3QcWBMxrrnKjIK72",
            "notAFirebaseDocId": "JUA84jfA73Dp",
        },
        "body": {
            "secureKey": {
                "token": "yMl.123",
            },
            "notSecureKey": {
                "$gt": "",
            },
            "isAdmin": True,
            "accessLevels": [1, 2, 3],
        },
        "query": {
            "title": "Research about secure Python apps",
            "emptyTitle": "",
            "UUIDv1": "307d2376-91f9-11ea-bb37-0242ac130002",
            "UUIDv4": "3d1e0dc9-3c5a-43fa-a3ea-5e758e92c6fe",
        },
        "ip": "10.0.0.7",
    }


@pytest.fixture
def validator(request_input):
    return InfiValidator(request_input)


@pytest.fixture
def xss_body():
    """A body combining operator keys and script payloads at several depths."""
    return {
        "id": 123,
        "username": "John",
        "password": "<script>alert('xss');</script>",
        "role": {
            "$eq": {
                "$ne": "not-not-admin",
            },
        },
        "someProperty": 123,
        "someArray": [
            "<script>alert('xss');</script>",
            123,
            {
                "$eq": "<script>alert('xss');</script>",
            },
            "<script>alert('xss');</script>",
        ],
        "importantField": "<script>alert('xss');</script>",
    }


@pytest.fixture
def clean_xss_body():
    """``xss_body`` after cleaning."""
    escaped = "&lt;script&gt;alert('xss');&lt;/script&gt;"
    return {
        "id": 123,
        "username": "John",
        "password": escaped,
        "role": {
            "eq": {
                "ne": "not-not-admin",
            },
        },
        "someProperty": 123,
        "someArray": [
            escaped,
            123,
            {
                "eq": escaped,
            },
            escaped,
        ],
        "importantField": escaped,
    }
