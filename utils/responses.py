"""
Responses Module - JSON envelope for success responses and plain-text errors
"""

from flask import jsonify, make_response


def envelope(message, data=None, status=200):
    """
    Build a success response wrapped in the API envelope

    Args:
        message (str): Human-readable message
        data: Payload; omitted from the body when None
        status (int): HTTP status code

    Returns:
        Response: JSON response
    """
    body = {'success': True, 'message': message}
    if data is not None:
        body['data'] = data
    return jsonify(body), status


def plain_error(message, status):
    """Plain-text error body, as written by failing routes"""
    response = make_response(f"{message}\n", status)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
