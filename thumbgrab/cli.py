#!/usr/bin/env python3
"""
CLI entry point for thumbgrab.
"""

import argparse
import asyncio
import json
import os
import signal
import sys

from dotenv import load_dotenv, find_dotenv

from thumbgrab import __version__
from thumbgrab.errors import ThumbgrabError
from thumbgrab.extractor import parse_video_id
from thumbgrab.links import DEFAULT_IMAGE_HOST, VARIANTS, build_thumbnail_links, download_filename
from thumbgrab.download import DEFAULT_TIMEOUT, download_thumbnail


def signal_handler(signum, frame):
    """Handle interrupt signals."""
    print("\n👋 Shutting down thumbgrab...")
    sys.exit(0)


def serve(args):
    # Imported here so the other commands don't need the web stack configured
    import app

    print(f"🚀 Starting thumbgrab on {args.host or app.API_HOST}:{args.port or app.API_PORT}...")
    app.run_server(host=args.host, port=args.port)
    return 0


def links(args):
    try:
        video_id = parse_video_id(args.url)
    except ThumbgrabError as e:
        print(f"❌ Error: {e}")
        return 1

    thumbnails = build_thumbnail_links(video_id, args.image_host)
    if args.json:
        print(json.dumps({"video_id": video_id, "thumbnails": thumbnails}, indent=2))
    else:
        print(f"Video ID: {video_id}")
        for variant, url in thumbnails.items():
            print(f"  {variant:<8} {url}")
    return 0


def download(args):
    try:
        video_id = parse_video_id(args.url)
    except ThumbgrabError as e:
        print(f"❌ Error: {e}")
        return 1

    url = build_thumbnail_links(video_id, args.image_host)[args.size]
    output_path = os.path.join(args.output, f"{download_filename(args.size)}.jpg")

    print(f"📥 Downloading {url}...")
    if not asyncio.run(download_thumbnail(url, output_path, timeout=args.timeout)):
        print("❌ Error: could not download the thumbnail")
        return 1

    print(f"✅ Saved {output_path}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="thumbgrab",
        description="thumbgrab - YouTube thumbnail links and downloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  thumbgrab serve --port 8000                                   # Run the web app
  thumbgrab links https://youtu.be/dQw4w9WgXcQ                  # Print thumbnail links
  thumbgrab download https://youtu.be/dQw4w9WgXcQ --size hq     # Save a thumbnail
        """
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--image-host",
        default=os.getenv("IMAGE_HOST", DEFAULT_IMAGE_HOST),
        help="Image server host (default: IMAGE_HOST or img.youtube.com)"
    )

    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the web app")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    serve_parser.set_defaults(func=serve)

    links_parser = subparsers.add_parser("links", help="Print the thumbnail links for a video URL")
    links_parser.add_argument("url", help="Video URL")
    links_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    links_parser.set_defaults(func=links)

    download_parser = subparsers.add_parser("download", help="Download one thumbnail size")
    download_parser.add_argument("url", help="Video URL")
    download_parser.add_argument("--size", choices=list(VARIANTS), default="maxres", help="Thumbnail variant")
    download_parser.add_argument("--output", default=".", help="Output directory")
    download_parser.add_argument(
        "--timeout",
        type=float,
        default=float(os.getenv("DOWNLOAD_TIMEOUT", DEFAULT_TIMEOUT)),
        help="Download timeout in seconds"
    )
    download_parser.set_defaults(func=download)

    return parser


def main(argv=None):
    """Main entry point for the thumbgrab command."""
    # Load environment variables from the .env file in the working directory
    load_dotenv(find_dotenv(usecwd=True))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up signal handlers for graceful shutdown
    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, 'SIGTERM'):
        signal.signal(signal.SIGTERM, signal_handler)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
