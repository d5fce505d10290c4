#!/usr/bin/env python3
"""
Integration tests for the thumbgrab command line.
"""

import unittest
import json
import os
import shutil
import sys
import tempfile
from io import StringIO
from unittest.mock import patch, AsyncMock

# Add parent directory to path to import thumbgrab
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thumbgrab.cli import main

VIDEO_ID = "dQw4w9WgXcQ"


@patch('thumbgrab.cli.signal.signal')
class TestCliFlow(unittest.TestCase):
    """Test the thumbgrab commands end to end"""

    def run_cli(self, *argv):
        with patch('sys.stdout', new_callable=StringIO) as stdout:
            code = main(list(argv))
        return code, stdout.getvalue()

    def test_links_text(self, mock_signal):
        code, output = self.run_cli('links', f"https://youtu.be/{VIDEO_ID}")

        self.assertEqual(code, 0)
        self.assertIn(f"Video ID: {VIDEO_ID}", output)
        self.assertIn(f"https://img.youtube.com/vi/{VIDEO_ID}/maxresdefault.jpg", output)
        self.assertIn(f"https://img.youtube.com/vi/{VIDEO_ID}/default.jpg", output)

    def test_links_json(self, mock_signal):
        code, output = self.run_cli(
            '--image-host', 'img.example.com',
            'links', "https://www.youtube.com/watch?v=abc123XYZ_-", '--json'
        )
        data = json.loads(output)

        self.assertEqual(code, 0)
        self.assertEqual(data['video_id'], "abc123XYZ_-")
        self.assertEqual(data['thumbnails']['maxres'], "https://img.example.com/vi/abc123XYZ_-/maxresdefault.jpg")
        self.assertEqual(list(data['thumbnails']), ['maxres', 'hq', 'mq', 'sd', 'default', 'medium', 'high'])

    def test_links_invalid_url(self, mock_signal):
        code, output = self.run_cli('links', "not a url")

        self.assertEqual(code, 1)
        self.assertIn("Not a recognizable video URL", output)

    @patch('thumbgrab.cli.download_thumbnail', new_callable=AsyncMock, return_value=True)
    def test_download(self, mock_download, mock_signal):
        code, output = self.run_cli(
            'download', f"https://www.youtube.com/shorts/{VIDEO_ID}",
            '--size', 'sd', '--output', 'thumbs', '--timeout', '5'
        )

        self.assertEqual(code, 0)
        mock_download.assert_awaited_once_with(
            f"https://img.youtube.com/vi/{VIDEO_ID}/sddefault.jpg",
            os.path.join('thumbs', "youtube-thumbnail-sd.jpg"),
            timeout=5.0
        )
        self.assertIn("Saved", output)

    @patch('thumbgrab.cli.download_thumbnail', new_callable=AsyncMock, return_value=False)
    def test_download_failure(self, mock_download, mock_signal):
        code, output = self.run_cli('download', f"https://youtu.be/{VIDEO_ID}")

        self.assertEqual(code, 1)
        self.assertIn("could not download", output)

    def test_download_without_video_id(self, mock_signal):
        code, output = self.run_cli('download', "https://www.youtube.com/watch?v=")

        self.assertEqual(code, 1)
        self.assertIn("Could not extract a video ID", output)

    def test_links_uses_dotenv_config(self, mock_signal):
        """IMAGE_HOST from a .env file in the working directory is honoured"""
        work_dir = tempfile.mkdtemp(prefix="thumbgrab_test_")
        previous_dir = os.getcwd()
        try:
            with open(os.path.join(work_dir, ".env"), "w", encoding="utf-8") as f:
                f.write("IMAGE_HOST=img.example.com\n")
            os.chdir(work_dir)

            with patch.dict(os.environ, {}):
                os.environ.pop("IMAGE_HOST", None)
                code, output = self.run_cli('links', f"https://youtu.be/{VIDEO_ID}")
        finally:
            os.chdir(previous_dir)
            shutil.rmtree(work_dir)

        self.assertEqual(code, 0)
        self.assertIn(f"https://img.example.com/vi/{VIDEO_ID}/maxresdefault.jpg", output)

    @patch('thumbgrab.cli.download_thumbnail', new_callable=AsyncMock, return_value=True)
    def test_download_uses_env_config(self, mock_download, mock_signal):
        with patch.dict(os.environ, {"IMAGE_HOST": "img.example.com", "DOWNLOAD_TIMEOUT": "3"}):
            code, output = self.run_cli('download', f"https://youtu.be/{VIDEO_ID}", '--size', 'hq')

        self.assertEqual(code, 0)
        mock_download.assert_awaited_once_with(
            f"https://img.example.com/vi/{VIDEO_ID}/hqdefault.jpg",
            os.path.join('.', "youtube-thumbnail-hq.jpg"),
            timeout=3.0
        )

    def test_no_command_prints_help(self, mock_signal):
        code, output = self.run_cli()

        self.assertEqual(code, 1)
        self.assertIn("usage: thumbgrab", output)

    def test_version(self, mock_signal):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli('--version')
        self.assertEqual(ctx.exception.code, 0)


if __name__ == '__main__':
    unittest.main()
