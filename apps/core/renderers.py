"""
Response rendering shared by every API router.
"""
from ninja.renderers import JSONRenderer


class PrettyJSONRenderer(JSONRenderer):
    """
    JSON with 4-space indentation and raw (non-\\u-escaped) Unicode.
    The stdlib encoder never escapes forward slashes, so URLs stay readable.
    """
    json_dumps_params = {'indent': 4, 'ensure_ascii': False}
