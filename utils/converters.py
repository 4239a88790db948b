"""
Converters Module - URL converters registered on the app's url map
"""

from werkzeug.routing import BaseConverter


class DigitsConverter(BaseConverter):
    """ASCII digits only; the value reaches the view as a string"""
    regex = r'[0-9]+'
    # Tried before the default string converter
    weight = 50
