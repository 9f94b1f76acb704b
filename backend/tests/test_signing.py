import hashlib
import time

import pytest

from order_relay.services.signing import build_raw_string, generate_sign, order_id_text


class TestGenerateSign:
    """Test signature generation for the upstream order endpoint."""

    def test_signature_is_md5_of_raw_string(self):
        result = generate_sign("o1", "secret", uid="uid-1", ts="1700000000")

        expected = hashlib.md5(b"secret_uid-1_orderId=o1_1700000000").hexdigest()
        assert result.sign == expected
        assert result.uid == "uid-1"
        assert result.ts == "1700000000"

    def test_raw_string_layout(self):
        assert build_raw_string("k", "u", 42, "10") == "k_u_orderId=42_10"

    def test_deterministic_for_fixed_inputs(self):
        a = generate_sign("o1", "k", uid="u", ts="1")
        b = generate_sign("o1", "k", uid="u", ts="1")
        assert a == b

    def test_generated_uid_and_timestamp(self):
        before = int(time.time())
        result = generate_sign("o1", "k")
        after = int(time.time())

        assert len(result.uid) == 36 and result.uid.count("-") == 4
        assert before <= int(result.ts) <= after
        assert len(result.sign) == 32
        int(result.sign, 16)

    def test_distinct_requests_do_not_collide(self):
        signs = {generate_sign("o1", "k").sign for _ in range(50)}
        assert len(signs) == 50

    @pytest.mark.parametrize(
        "order_id, text",
        [("o1", "o1"), (42, "42"), (1.0, "1"), (1.5, "1.5"), (True, "true"), (False, "false")],
    )
    def test_order_id_rendered_as_json_literal(self, order_id, text):
        assert order_id_text(order_id) == text

    def test_boolean_order_id_in_signature(self):
        result = generate_sign(True, "k", uid="u", ts="1")
        assert result.sign == hashlib.md5(b"k_u_orderId=true_1").hexdigest()
