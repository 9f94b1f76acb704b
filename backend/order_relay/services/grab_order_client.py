from __future__ import annotations

import logging
from typing import Any

import requests
import urllib3
from requests.adapters import HTTPAdapter

from ..errors import UpstreamError
from ..schemas import ClientConfig
from .signing import SignResult, generate_sign

logger = logging.getLogger(__name__)

# The upstream expects this exact (non-standard) value.
CONTENT_TYPE = "application/json;charset:utf-8"


def build_headers(conf: ClientConfig, signed: SignResult) -> dict[str, str]:
    return {
        "Content-Type": CONTENT_TYPE,
        "Version": conf.version,
        "X-Auth-Token": conf.token,
        "Sign": signed.sign,
        "Uuid": signed.uid,
        "Timestamp": signed.ts,
    }


def _is_blank(value: Any) -> bool:
    """True for payloads that carry nothing: None, "", 0, False, NaN. `{}` and `[]` are kept."""
    if value is None or value == "":
        return True
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def _error_payload(resp: requests.Response) -> Any:
    """Upstream error body: parsed JSON if possible, else the raw text."""
    try:
        return resp.json()
    except ValueError:
        return resp.text


class GrabOrderClient:
    """
    Thin wrapper around the upstream "putOrderByDs" endpoint.

    Each call is a single attempt: no retry, no caching and no protection
    against the same orderId being submitted twice.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        verify_tls: bool = False,
        session: requests.Session | None = None,
        pool_maxsize: int = 64,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.verify_tls = verify_tls
        if session is None:
            # one pool shared by every threadpool worker; size it for bursts of grabs
            session = requests.Session()
            adapter = HTTPAdapter(pool_maxsize=pool_maxsize)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self.session = session

        if not verify_tls:
            # 上游证书不校验，避免每次请求都刷 InsecureRequestWarning
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def grab(self, conf: ClientConfig, order_id: Any) -> Any:
        """
        Sign and forward one order grab, returning the upstream JSON body.

        Raises UpstreamError on network errors, timeouts, non-2xx answers and
        2xx answers whose body is not JSON.
        """
        signed = generate_sign(order_id, conf.key)
        headers = build_headers(conf, signed)

        try:
            resp = self.session.post(
                self.url,
                json={"orderId": order_id},
                headers=headers,
                timeout=self.timeout,
                verify=self.verify_tls,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.HTTPError as exc:
            error = _error_payload(exc.response) if exc.response is not None else str(exc)
            logger.error("[GrabOrderClient] request failed: %s", error)
            raise UpstreamError(str(exc) if _is_blank(error) else error) from exc
        except requests.exceptions.JSONDecodeError as exc:
            error = resp.text or str(exc)
            logger.error("[GrabOrderClient] malformed upstream response: %s", error)
            raise UpstreamError(error) from exc
        except requests.RequestException as exc:
            logger.error("[GrabOrderClient] request failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        logger.info("[GrabOrderClient] grab response client=%s order=%s: %s", conf.client_id, order_id, data)
        return data
