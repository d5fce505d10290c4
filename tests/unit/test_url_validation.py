import unittest
import os
import sys

# Add parent directories to path to import thumbgrab and the test helpers
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from thumbgrab.extractor import is_video_url, VideoUrlParser
from utils.test_helpers import EQUIVALENT_URLS, NOT_URLS, NO_ID_URLS


class TestURLValidation(unittest.TestCase):
    """Tests for video URL recognition"""

    def test_recognized_urls(self):
        """Every supported URL shape is recognized"""
        for url in EQUIVALENT_URLS:
            with self.subTest(url=url):
                self.assertTrue(is_video_url(url))

    def test_platform_urls_without_id_are_still_urls(self):
        """Platform URLs are recognized even when they carry no video ID"""
        for url in NO_ID_URLS:
            with self.subTest(url=url):
                self.assertTrue(is_video_url(url))

    def test_rejected_inputs(self):
        """Search terms, empty input and other sites are not video URLs"""
        for text in NOT_URLS:
            with self.subTest(text=text):
                self.assertFalse(is_video_url(text))

    def test_none_is_not_a_url(self):
        self.assertFalse(is_video_url(None))

    def test_custom_hosts(self):
        """A parser only accepts the hosts it was configured with"""
        parser = VideoUrlParser(hosts=("Example.com",), short_hosts=("s.example",))

        self.assertTrue(parser.is_video_url("https://example.com/watch?v=abc123XYZ_-"))
        self.assertTrue(parser.is_video_url("https://S.EXAMPLE/abc123XYZ_-"))
        self.assertFalse(parser.is_video_url("https://www.youtube.com/watch?v=abc123XYZ_-"))
        self.assertFalse(is_video_url("https://example.com/watch?v=abc123XYZ_-"))


if __name__ == '__main__':
    unittest.main()
