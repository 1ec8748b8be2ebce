"""Tests for models.py module."""

import pytest

from secrets_sync.models import DeclaredSecret, SecretResult, SecretSource, SyncAction, SyncReport


class TestDeclaredSecretSource:
    """Tests for source precedence helpers."""

    def test_plaintext_only(self):
        secret = DeclaredSecret(plaintext="value")
        assert secret.source == SecretSource.PLAINTEXT
        assert secret.ignored_sources == []

    def test_empty_key_value_wins(self):
        """Test an empty key_value mapping still counts as set."""
        secret = DeclaredSecret(key_value={}, plaintext="value")
        assert secret.source == SecretSource.KEY_VALUE
        assert secret.ignored_sources == [SecretSource.PLAINTEXT]

    def test_file_beats_plaintext(self):
        secret = DeclaredSecret(file="a.txt", plaintext="value")
        assert secret.source == SecretSource.FILE
        assert secret.ignored_sources == [SecretSource.PLAINTEXT]

    def test_declared_secret_is_frozen(self):
        secret = DeclaredSecret(plaintext="value")
        with pytest.raises(AttributeError):
            secret.plaintext = "other"  # type: ignore[misc]

    def test_mappings_are_read_only(self):
        secret = DeclaredSecret(key_value={"a": "b"}, tags={"env": "local"})
        with pytest.raises(TypeError):
            secret.key_value["a"] = "changed"  # type: ignore[index]
        with pytest.raises(TypeError):
            secret.tags["env"] = "prod"  # type: ignore[index]

    def test_mappings_are_copied(self):
        """Test changing the source dict after construction has no effect."""
        tags = {"env": "local"}
        secret = DeclaredSecret(plaintext="x", tags=tags)
        tags["env"] = "prod"
        assert secret.tags == {"env": "local"}


class TestSyncReport:
    """Tests for SyncReport aggregation."""

    def test_empty_report_is_ok(self):
        report = SyncReport()
        assert report.ok
        assert report.counts() == {}

    def test_counts_and_failures(self):
        report = SyncReport()
        report.add(SecretResult("a", SyncAction.CREATED))
        report.add(SecretResult("b", SyncAction.CREATED))
        report.add(SecretResult("c", SyncAction.UPDATE_FAILED, "boom"))

        assert report.counts() == {SyncAction.CREATED: 2, SyncAction.UPDATE_FAILED: 1}
        assert [result.name for result in report.failed] == ["c"]
        assert not report.ok

    @pytest.mark.parametrize(
        "action,failed",
        [
            (SyncAction.CREATED, False),
            (SyncAction.UPDATED, False),
            (SyncAction.UNCHANGED, False),
            (SyncAction.CREATE_FAILED, True),
            (SyncAction.UPDATE_FAILED, True),
            (SyncAction.DESCRIBE_FAILED, True),
            (SyncAction.RESOLUTION_FAILED, True),
        ],
    )
    def test_action_failed_flag(self, action, failed):
        assert action.failed is failed
