"""Unit tests for the post visibility rule."""

from datetime import datetime, timedelta, timezone

from miniblog.domain.service import is_visible
from tests.conftest import days_ago, make_post


class TestIsVisible:
    """Tests for is_visible."""

    def test_published_past_post_is_visible_to_anyone(self):
        """A published post dated in the past is public."""
        post = make_post(pub_date=days_ago(1))

        assert is_visible(post, is_privileged=False)
        assert is_visible(post, is_privileged=True)

    def test_draft_is_hidden_from_anonymous_readers(self):
        """Unpublished posts are only visible to the operator."""
        post = make_post(is_published=False, pub_date=days_ago(1))

        assert not is_visible(post, is_privileged=False)
        assert is_visible(post, is_privileged=True)

    def test_scheduled_post_is_hidden_from_anonymous_readers(self):
        """Posts dated in the future are only visible to the operator."""
        post = make_post(pub_date=days_ago(-1))

        assert not is_visible(post, is_privileged=False)
        assert is_visible(post, is_privileged=True)

    def test_post_dated_exactly_now_is_not_yet_visible(self):
        """The publication date must be strictly before the reference time."""
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        post = make_post(pub_date=now)

        assert not is_visible(post, is_privileged=False, now=now)
        assert is_visible(
            post, is_privileged=False, now=now + timedelta(microseconds=1)
        )

    def test_naive_publication_date_is_treated_as_utc(self):
        """Naive timestamps are normalized to UTC before comparing."""
        post = make_post(pub_date=datetime(2024, 5, 1, 12, 0))
        now = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

        assert post.pub_date.tzinfo is not None
        assert is_visible(post, is_privileged=False, now=now)
