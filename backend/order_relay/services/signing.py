import hashlib
import time
import uuid
from typing import Any, NamedTuple


class SignResult(NamedTuple):
    sign: str
    uid: str
    ts: str


def order_id_text(order_id: Any) -> str:
    """
    Render a JSON scalar orderId the way the upstream's signer does:
    `true`/`false` for booleans, no trailing `.0` on integral floats.
    """
    if isinstance(order_id, bool):
        return "true" if order_id else "false"
    if isinstance(order_id, float) and order_id.is_integer():
        return str(int(order_id))
    return str(order_id)


def build_raw_string(key: str, uid: str, order_id: Any, ts: str) -> str:
    return f"{key}_{uid}_orderId={order_id_text(order_id)}_{ts}"


def generate_sign(
    order_id: Any,
    key: str,
    *,
    uid: str | None = None,
    ts: str | None = None,
) -> SignResult:
    """
    Sign one order grab for the upstream API.

    签名规则：md5("{key}_{uuid}_orderId={orderId}_{秒级时间戳}")，hex 小写。

    `uid` and `ts` are generated per call (uuid4, current Unix seconds) unless
    given explicitly.
    """
    if ts is None:
        ts = str(int(time.time()))
    if uid is None:
        uid = str(uuid.uuid4())

    raw = build_raw_string(key, uid, order_id, ts)
    sign = hashlib.md5(raw.encode("utf-8")).hexdigest()
    return SignResult(sign=sign, uid=uid, ts=ts)
