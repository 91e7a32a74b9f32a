"""Result Envelope — tests for the success/failure constructors."""

from tinmarin.core.result import Failure, Result


def test_ok_carries_content_without_failure():
    result = Result.ok({"id": "x"})
    assert result.success
    assert result.content == {"id": "x"}
    assert result.failure is None


def test_fail_builds_error_body_with_extras():
    result = Result.fail(Failure.NOT_FOUND, "FAQ not found.", hint="check id")
    assert not result.success
    assert result.failure is Failure.NOT_FOUND
    assert result.content == {"error": "FAQ not found.", "hint": "check id"}
