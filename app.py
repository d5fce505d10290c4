import os
import io
import asyncio
import logging
from logging.handlers import RotatingFileHandler
import traceback
import time
from flask import Flask, request, jsonify, redirect, render_template, send_file, url_for
from flask_cors import CORS
from dotenv import load_dotenv, find_dotenv

import thumbgrab
from thumbgrab.errors import InvalidUrlError, VideoIdError
from thumbgrab.extractor import parse_video_id, is_valid_video_id
from thumbgrab.links import (
    DEFAULT_IMAGE_HOST,
    VARIANTS,
    build_thumbnail_links,
    thumbnail_url,
    download_filename,
    download_sizes,
    additional_types,
)
from thumbgrab.download import fetch_thumbnail, attachment_filename, DEFAULT_TIMEOUT
from thumbgrab.translations import (
    SUPPORTED_LANGUAGES,
    get_translations,
    is_supported,
)

# Load environment variables from .env file
load_dotenv(find_dotenv(usecwd=True))

# Set up logging with rotation
log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log_file = os.getenv("LOG_FILE", "thumbgrab.log")
log_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8')  # 5MB per file, keep 5 backup files
log_handler.setFormatter(log_formatter)
console_handler = logging.StreamHandler()
console_handler.setFormatter(log_formatter)

logger = logging.getLogger('thumbgrab')
logger.setLevel(logging.INFO)
if not logger.handlers:
    logger.addHandler(log_handler)
    logger.addHandler(console_handler)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
IMAGE_HOST = os.getenv("IMAGE_HOST", DEFAULT_IMAGE_HOST)
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
DOWNLOAD_TIMEOUT = float(os.getenv("DOWNLOAD_TIMEOUT", DEFAULT_TIMEOUT))

if not is_supported(DEFAULT_LANGUAGE):
    raise ValueError(f"DEFAULT_LANGUAGE '{DEFAULT_LANGUAGE}' is not a supported language!")

PACKAGE_DIR = os.path.dirname(os.path.abspath(thumbgrab.__file__))

# Initialize Flask app
app = Flask(
    __name__,
    template_folder=os.path.join(PACKAGE_DIR, 'templates'),
    static_folder=os.path.join(PACKAGE_DIR, 'static'),
)
CORS(app)
app.start_time = time.time()


def build_result(url):
    """Run one submission: extract the video ID and derive its thumbnail links.

    Raises InvalidUrlError or VideoIdError when the input cannot be used.
    """
    video_id = parse_video_id(url)
    links = build_thumbnail_links(video_id, IMAGE_HOST)
    logger.info(f"Built {len(links)} thumbnail links for video {video_id}")
    return {
        'video_id': video_id,
        'thumbnails': links,
        'main_thumbnail': links['maxres'],
        'download_sizes': download_sizes(links),
        'additional_types': additional_types(links),
    }


@app.route('/', methods=['GET'])
def home():
    return redirect(url_for('language_page', lang=DEFAULT_LANGUAGE))


@app.route('/<lang>', methods=['GET', 'POST'])
def language_page(lang):
    """Render the form, and the results or error of a submission"""
    current_lang = lang if is_supported(lang) else DEFAULT_LANGUAGE
    t = get_translations(current_lang)

    url = ''
    result = None
    error = None

    if request.method == 'POST':
        url = request.form.get('url', '').strip()
        try:
            result = build_result(url)
        except (InvalidUrlError, VideoIdError) as e:
            logger.info(f"Rejected submission: {e}")
            error = t['errors'][e.code]
        except Exception as e:
            logger.error(f"Error processing submission {url!r}: {e}")
            logger.error(traceback.format_exc())
            error = t['errors']['processing']

    return render_template(
        'index.html',
        t=t,
        current_lang=current_lang,
        languages=SUPPORTED_LANGUAGES,
        url=url,
        result=result,
        error=error,
    )


# API Routes
@app.route('/api/thumbnails', methods=['GET'])
def get_thumbnails():
    """Get the thumbnail link set for a video URL"""
    url = request.args.get('url', '').strip()
    t = get_translations(request.args.get('lang', DEFAULT_LANGUAGE))

    try:
        result = build_result(url)
    except (InvalidUrlError, VideoIdError) as e:
        logger.info(f"Rejected API request: {e}")
        return jsonify({"error": t['errors'][e.code], "code": e.code}), 400

    return jsonify({
        "video_id": result['video_id'],
        "thumbnails": result['thumbnails'],
    })


@app.route('/api/download/<video_id>/<variant>', methods=['GET'])
def download_thumbnail(video_id, variant):
    """Fetch a thumbnail from the image server and hand it back as a file"""
    if not is_valid_video_id(video_id) or variant not in VARIANTS:
        return jsonify({"error": "Unknown thumbnail"}), 404

    image_url = thumbnail_url(video_id, variant, IMAGE_HOST)
    data = asyncio.run(fetch_thumbnail(image_url, timeout=DOWNLOAD_TIMEOUT))
    if data is None:
        return jsonify({"error": "Could not download thumbnail"}), 502

    filename = attachment_filename(request.args.get('filename'), download_filename(variant))
    logger.info(f"Sending {filename} for video {video_id}")
    return send_file(
        io.BytesIO(data),
        mimetype='image/jpeg',
        as_attachment=True,
        download_name=filename,
    )


@app.route('/api/languages', methods=['GET'])
def get_languages():
    """Get the list of supported UI languages"""
    return jsonify({
        "default": DEFAULT_LANGUAGE,
        "languages": SUPPORTED_LANGUAGES,
    })


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "version": thumbgrab.__version__,
        "uptime": time.time() - app.start_time
    })


def run_server(host=None, port=None, debug=False):
    """Run the web server"""
    host = host or API_HOST
    port = port or API_PORT
    logger.info(f"Starting web server on {host}:{port}")
    app.run(host=host, port=port, debug=debug, use_reloader=False)


# Main entry point
if __name__ == "__main__":
    run_server()
