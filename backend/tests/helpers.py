import json

import requests

UPSTREAM_URL = "https://upstream.test/api/order/putOrderByDs"


def make_response(status_code: int = 200, body=None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response carrying a JSON body or raw text."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.url = UPSTREAM_URL
    if text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    return resp
