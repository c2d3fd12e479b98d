#!/usr/bin/env python3
"""
DocBuddy Backend Server

Simple Flask server exposing the DocBuddy suggestion API.
"""

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError

from docbuddy import __version__
from docbuddy.api import DocBuddyAPI
from docbuddy.models.suggestion import FileSuggestionRequest, PullRequestSuggestionRequest


def create_app(docbuddy_api: DocBuddyAPI = None) -> Flask:
    """Create the Flask app around a DocBuddyAPI instance."""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for frontend

    api = docbuddy_api or DocBuddyAPI()

    @app.route('/api/v1/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'service': 'docbuddy-backend',
            'version': __version__
        })

    @app.route('/api/v1/suggestions/file', methods=['POST'])
    def suggest_file():
        """Create suggestions for a single file patch."""
        try:
            file_request = FileSuggestionRequest(**(request.get_json(silent=True) or {}))
        except ValidationError as e:
            return jsonify({'error': str(e), 'status': 'invalid'}), 400

        try:
            report = api.process_file(file_request.to_target(), file_request.patch)

            return jsonify({
                'status': 'failed' if report.error else 'completed',
                'file_path': report.file_path,
                'success_count': report.success_count,
                'outcomes': {o.value: report.count(o) for o in set(report.outcomes)}
            })

        except Exception as e:
            return jsonify({
                'error': str(e),
                'status': 'failed'
            }), 500

    @app.route('/api/v1/suggestions/pull-request', methods=['POST'])
    def suggest_pull_request():
        """Create suggestions for every documentation file in a PR."""
        try:
            pr_request = PullRequestSuggestionRequest(**(request.get_json(silent=True) or {}))
        except ValidationError as e:
            return jsonify({'error': str(e), 'status': 'invalid'}), 400

        try:
            result = api.review_pull_request(
                repository=pr_request.repository,
                pr_number=pr_request.pr_number
            )

            return jsonify({
                'run_id': result.run_id,
                'status': result.status,
                'repository': result.repository,
                'pr_number': result.pr_number,
                'comments_by_file': result.comments_by_file,
                'total_comments': result.total_comments,
                'processing_time': result.processing_time
            })

        except Exception as e:
            return jsonify({
                'error': str(e),
                'status': 'failed'
            }), 500

    return app


if __name__ == '__main__':
    print("🚀 Starting DocBuddy Backend Server...")
    print("📍 Server will be available at: http://localhost:8000")
    print("📋 API Documentation:")
    print("   - Health Check: GET /api/v1/health")
    print("   - File Suggestions: POST /api/v1/suggestions/file")
    print("   - PR Suggestions: POST /api/v1/suggestions/pull-request")

    docbuddy_api = DocBuddyAPI()
    app = create_app(docbuddy_api)
    app.run(
        host='0.0.0.0',
        port=8000,
        debug=docbuddy_api.config.debug
    )
