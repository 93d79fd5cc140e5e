"""Unit tests for logging helpers."""

import pytest

from tasklist.core.logging import mask_email


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("alice@example.com", "a***@example.com"),
        ("b@x.com", "b***@x.com"),
        ("no-at-sign", "***"),
        ("@x.com", "***"),
    ],
)
def test_mask_email(email: str, expected: str):
    assert mask_email(email) == expected
