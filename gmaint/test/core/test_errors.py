"""Tests for gmaint.core.errors module."""

from gmaint.core.errors import ErrorCode, FailureKind


class TestErrorCode:
    """Exit code values are stable."""

    def test_values(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.MAINTENANCE_ERROR == 2

    def test_str(self) -> None:
        assert str(ErrorCode.MAINTENANCE_ERROR) == "maintenance error"

    def test_usable_as_exit_code(self) -> None:
        code: int = int(ErrorCode.MAINTENANCE_ERROR)
        assert code == 2


class TestFailureKind:
    def test_values(self) -> None:
        assert FailureKind.DIRECTORY_NOT_FOUND == "directory-not-found"
        assert FailureKind.LAUNCH_FAILED == "launch-failed"
        assert FailureKind.PARSE_FAILED == "parse-failed"
