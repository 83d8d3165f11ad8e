"""Test YouTube URL parsing."""

import pytest
from sentitube.core.errors import InvalidVideoUrlError
from sentitube.core.urls import extract_video_id, require_video_id


class TestExtractVideoId:
    """Test video identifier extraction."""

    @pytest.mark.parametrize("url, expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtube.com/watch?v=abc123&t=42s", "abc123"),
        ("https://m.youtube.com/watch?feature=share&v=XyZ_-9", "XyZ_-9"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?si=tracking", "dQw4w9WgXcQ"),
        ("  https://youtu.be/abc  ", "abc"),
    ])
    def test_recognized_shapes(self, url, expected):
        """Test the query-parameter and short-link forms."""
        assert extract_video_id(url) == expected

    @pytest.mark.parametrize("url", [
        "",
        "not a url",
        "youtube.com/watch?v=abc",  # no scheme
        "https://vimeo.com/123456",
        "https://www.youtube.com/",
        "https://www.youtube.com/watch",
        "https://www.youtube.com/watch?v=",
        "https://youtu.be/",
        "https://example.com/watch?v=abc",
    ])
    def test_other_shapes_have_no_id(self, url):
        """Test that anything else yields no identifier."""
        assert extract_video_id(url) is None

    def test_non_string_input(self):
        """Test that non-string input yields no identifier."""
        assert extract_video_id(None) is None

    def test_require_video_id(self):
        """Test the raising variant."""
        assert require_video_id("https://youtu.be/abc") == "abc"
        with pytest.raises(InvalidVideoUrlError) as exc_info:
            require_video_id("https://vimeo.com/1")
        assert "Invalid YouTube URL" in exc_info.value.user_message


if __name__ == "__main__":
    pytest.main([__file__])
