import pytest

from foobar_server.domain.sequence import InvalidLength
from foobar_server.service.sequence_service import compute_sequence


def test_compute_sequence_renders():
    assert compute_sequence(length=3) == "[1 2 foo]"


def test_compute_sequence_propagates_invalid_length():
    with pytest.raises(InvalidLength) as exc:
        compute_sequence(length=-1)
    assert exc.value.code == "invalid_length"
