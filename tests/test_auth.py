"""Tests for webhook secret verification."""

from unittest.mock import patch

import pytest

from meetbot.errors import AuthenticationError
from meetbot.webhooks import WebhookSecretDependency, verify_secret


class TestVerifySecret:
    """Tests for verify_secret()."""

    def test_equal_secrets(self):
        """Test that equal secrets authenticate."""
        assert verify_secret("s3cret", "s3cret") is True

    def test_unicode_secrets(self):
        """Test that non-ASCII secrets are compared as UTF-8."""
        assert verify_secret("pässwörd", "pässwörd") is True
        assert verify_secret("passwörd", "pässwörd") is False

    @pytest.mark.parametrize(
        "provided",
        [
            "s3cre",  # shorter
            "s3crett",  # longer
            "S3cret",  # single-bit difference in the first byte
            "s3creu",  # single-bit difference in the last byte
            "x3cret",  # first byte differs
            "s3crex",  # last byte differs
            "",
        ],
    )
    def test_unequal_secrets(self, provided):
        """Test that any difference fails."""
        assert verify_secret(provided, "s3cret") is False

    def test_missing_secret_is_empty_string(self):
        """Test that a missing caller secret is not a pass."""
        assert verify_secret(None, "s3cret") is False

    def test_empty_expected_never_matches(self):
        """Test that an unconfigured secret fails closed."""
        assert verify_secret("", "") is False
        assert verify_secret(None, "") is False

    def test_compares_fixed_length_digests(self):
        """Test that compare_digest always sees 32-byte inputs."""
        with patch(
            "meetbot.webhooks.auth.hmac.compare_digest", return_value=False
        ) as compare:
            verify_secret("x", "s3cret")
            verify_secret("a-much-longer-secret-than-expected", "s3cret")

        for call in compare.call_args_list:
            provided, expected = call.args
            assert len(provided) == 32
            assert len(expected) == 32


class TestWebhookSecretDependency:
    """Tests for the FastAPI secret dependency."""

    async def test_accepts_matching_secret(self):
        """Test that a matching secret passes."""
        dependency = WebhookSecretDependency("s3cret")
        assert await dependency(secret="s3cret") is None

    async def test_rejects_wrong_secret(self):
        """Test that a wrong secret raises AuthenticationError."""
        dependency = WebhookSecretDependency("s3cret")
        with pytest.raises(AuthenticationError) as exc_info:
            await dependency(secret="nope")
        assert exc_info.value.status_code == 401
        assert exc_info.value.error == "Unauthorized"

    async def test_rejects_empty_secret(self):
        """Test that an empty secret raises AuthenticationError."""
        dependency = WebhookSecretDependency("s3cret")
        with pytest.raises(AuthenticationError):
            await dependency(secret="")
