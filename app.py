#!/usr/bin/env python3
"""
Flask Web Application for Frame Trace Analyzer
Provides both a web UI and REST API endpoints for analyzing per-frame profiler CSV captures.
"""

from flask import Flask, render_template, request, jsonify
from werkzeug.utils import secure_filename
import os
from frame_analyzer import FrameAnalyzer
from frame_analyzer.core.types import MAX_FRAMES_TO_PROCESS
from frame_analyzer.formatters import format_value
from frame_analyzer.processors import load_stat_definitions
from frame_analyzer.sources import PayloadSession
from frame_analyzer.utils import configure_logging, get_logger
from frame_analyzer.web import prepare_results

logger = get_logger(__name__)

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024
app.config['FRAME_LIMIT'] = int(os.environ.get('FRAME_ANALYZER_FRAME_LIMIT', MAX_FRAMES_TO_PROCESS))
app.config['STATS_FILE'] = os.environ.get('FRAME_ANALYZER_STATS_FILE')
app.config['FETCH_TIMEOUT'] = None

app.add_template_filter(format_value, 'format_value')

ALLOWED_EXTENSIONS = {'csv', 'txt'}
MAX_FRAME_ROWS = 100

payload_session = PayloadSession(fetch_timeout=app.config['FETCH_TIMEOUT'])


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def build_analyzer():
    """Create an analyzer from the current app configuration."""
    stat_definitions = None
    if app.config.get('STATS_FILE'):
        stat_definitions = load_stat_definitions(app.config['STATS_FILE'])
    return FrameAnalyzer(
        frame_limit=app.config['FRAME_LIMIT'],
        stat_definitions=stat_definitions
    )


def run_analysis(payload):
    """
    Run one analysis over a payload. Callers hold payload_session.lock.

    Returns:
        Results dictionary, or None when the payload was empty
    """
    analyzer = build_analyzer()
    if analyzer.run(payload) is None:
        return None
    return prepare_results(analyzer)


def analyze_upload(data, filename):
    """Make an uploaded payload the last-loaded one and analyze it."""
    with payload_session.lock:
        return run_analysis(payload_session.load_bytes(data, filename))


def analyze_remote(csv_url):
    """
    Analyze a remote trace, falling back to the last loaded payload.

    Returns:
        Tuple of (results or None, source name)
    """
    with payload_session.lock:
        payload = payload_session.resolve(csv_url)
        return run_analysis(payload), payload_session.last_source


def read_upload():
    """
    Read the uploaded trace file from the request.

    Returns:
        Tuple of (filename, file bytes, error message)
    """
    if 'file' not in request.files:
        return None, None, 'No file provided'

    file = request.files['file']

    if not file.filename:
        return None, None, 'No file selected'

    if not allowed_file(file.filename):
        return None, None, 'Invalid file type. Only CSV files are allowed.'

    return secure_filename(file.filename), file.read(), None


@app.route('/')
def index():
    """
    Main page with file upload form.
    A 'csv' query parameter names a remote trace that is analyzed on load.
    """
    csv_url = request.args.get('csv')
    if csv_url:
        try:
            results, source = analyze_remote(csv_url)
        except Exception as e:
            logger.exception("Analysis of %s failed", csv_url)
            return render_template('index.html', error=f'Error analyzing file: {str(e)}')
        if results is not None:
            return render_template('results.html',
                                   filename=source,
                                   results=results,
                                   max_frame_rows=MAX_FRAME_ROWS)
    return render_template('index.html')


@app.route('/api/analyze', methods=['GET'])
def analyze_remote_api():
    """
    API endpoint to analyze a remote trace or the last loaded one.
    Accepts: optional 'csv' query parameter with the trace URL
    Returns: JSON with analysis results
    """
    try:
        results, _ = analyze_remote(request.args.get('csv'))
    except Exception as e:
        logger.exception("Analysis failed")
        return jsonify({'error': str(e)}), 500

    if results is None:
        return jsonify({'error': 'No trace loaded'}), 404

    return jsonify(results)


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to analyze an uploaded trace file.
    Accepts: multipart/form-data with field 'file': trace CSV file
    Returns: JSON with analysis results
    """
    filename, data, error = read_upload()
    if error:
        return jsonify({'error': error}), 400

    try:
        results = analyze_upload(data, filename)
    except Exception as e:
        logger.exception("Analysis of %s failed", filename)
        return jsonify({'error': str(e)}), 500

    if results is None:
        return jsonify({'error': 'File is empty'}), 400

    return jsonify(results)


@app.route('/analyze', methods=['POST'])
def analyze_web():
    """
    Web endpoint to analyze a trace file.
    Accepts: multipart/form-data with 'file' field
    Returns: HTML results page
    """
    filename, data, error = read_upload()
    if error:
        return render_template('index.html', error=error)

    try:
        results = analyze_upload(data, filename)
    except Exception as e:
        logger.exception("Analysis of %s failed", filename)
        return render_template('index.html', error=f'Error analyzing file: {str(e)}')

    if results is None:
        return render_template('index.html', error='File is empty')

    return render_template('results.html',
                           filename=filename,
                           results=results,
                           max_frame_rows=MAX_FRAME_ROWS)


if __name__ == '__main__':
    configure_logging()
    app.run(debug=True, host='0.0.0.0', port=5001)
