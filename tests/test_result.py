import pytest

from graph_store import DuplicateIdentifier, Result


def test_success_is_truthy_and_unwraps():
    result = Result.success("value")
    assert result.ok
    assert result
    assert result.unwrap() == "value"


def test_failure_is_falsy_and_raises_on_unwrap():
    error = DuplicateIdentifier("node", 1)
    result = Result.failure(error)
    assert not result.ok
    assert not result
    assert result.value is None
    with pytest.raises(DuplicateIdentifier) as excinfo:
        result.unwrap()
    assert excinfo.value is error
