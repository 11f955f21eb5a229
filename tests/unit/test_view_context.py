"""
Unit tests for HtmlViewContext
"""

from datetime import UTC, datetime, timedelta

import pytest

from prepro.presenters import HtmlViewContext, distance_of_time_in_words


BASE_TIME = datetime(2025, 1, 1, 12, 0)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=10), "less than a minute"),
        (timedelta(minutes=1), "1 minute"),
        (timedelta(minutes=30), "30 minutes"),
        (timedelta(minutes=60), "about 1 hour"),
        (timedelta(hours=5), "about 5 hours"),
        (timedelta(hours=30), "1 day"),
        (timedelta(days=10), "10 days"),
        (timedelta(days=40), "about 1 month"),
        (timedelta(days=120), "4 months"),
        (timedelta(days=370), "about 1 year"),
        (timedelta(days=365 * 2 + 200), "over 2 years"),
        (timedelta(days=365 * 2 + 300), "almost 3 years"),
    ],
)
def test_distance_of_time_in_words(delta, expected):
    """Test distance table boundaries"""
    assert distance_of_time_in_words(BASE_TIME - delta, BASE_TIME) == expected


def test_distance_is_symmetric():
    """Test argument order does not matter"""
    later = BASE_TIME + timedelta(days=3)
    assert distance_of_time_in_words(later, BASE_TIME) == "3 days"
    assert distance_of_time_in_words(BASE_TIME, later) == "3 days"


class TestHtmlViewContext:
    """Tests for HtmlViewContext"""

    def test_time_ago_in_words_uses_clock(self):
        """Test injected clock"""
        view_context = HtmlViewContext(now=lambda: BASE_TIME)

        assert view_context.time_ago_in_words(BASE_TIME - timedelta(hours=2)) == "about 2 hours"

    def test_time_ago_in_words_mixed_timezones(self):
        """Test naive value against aware clock"""
        view_context = HtmlViewContext(now=lambda: BASE_TIME.replace(tzinfo=UTC))

        assert view_context.time_ago_in_words(BASE_TIME - timedelta(days=2)) == "2 days"

    def test_content_tag(self):
        """Test tag rendering with attributes"""
        result = HtmlViewContext().content_tag("span", "3 days ago", title="01.01.2025 12:00")

        assert result == '<span title="01.01.2025 12:00">3 days ago</span>'

    def test_content_tag_escapes_content_and_attributes(self):
        """Test HTML escaping"""
        result = HtmlViewContext().content_tag("span", "<b>&</b>", title='"quoted"')

        assert "&lt;b&gt;&amp;&lt;/b&gt;" in result
        assert 'title="&quot;quoted&quot;"' in result

    def test_content_tag_class_attribute(self):
        """Test trailing underscore is dropped and None attributes skipped"""
        result = HtmlViewContext().content_tag("span", "None Given", class_="label", title=None)

        assert result == '<span class="label">None Given</span>'
