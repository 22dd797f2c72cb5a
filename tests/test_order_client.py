import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

import requests

from ordercal.services.order_client import (
    OrderClient, OrderError, OrderRejected, OrderTransportError, iso,
)

ENDPOINT = "https://orders.test/order"


def _response(status):
    r = Mock()
    r.status_code = status
    r.text = "body"
    return r


class PayloadTests(unittest.TestCase):

    def test_payload_shape(self):
        now = datetime(2024, 2, 3, 9, 15, 0, 123000, tzinfo=timezone.utc)
        self.assertEqual(
            OrderClient.build_payload("2024-02-05", now=now),
            {"date": "2024-02-05", "timestamp": "2024-02-03T09:15:00.123Z"},
        )

    def test_iso_converts_to_utc(self):
        cet = timezone(timedelta(hours=1))
        self.assertEqual(iso(datetime(2024, 2, 3, 10, 0, tzinfo=cet)), "2024-02-03T09:00:00.000Z")
        self.assertEqual(iso(datetime(2024, 2, 3, 10, 0)), "2024-02-03T10:00:00.000Z")

    def test_bad_date_rejected_before_sending(self):
        with patch("ordercal.services.order_client.requests.post") as post:
            with self.assertRaises(ValueError):
                OrderClient(ENDPOINT).place_order("2024-2-5")
            post.assert_not_called()


class PlaceOrderTests(unittest.TestCase):

    @patch("ordercal.services.order_client.requests.post")
    def test_posts_json_to_endpoint(self, post):
        post.return_value = _response(200)

        payload = OrderClient(ENDPOINT).place_order("2024-02-05")

        post.assert_called_once()
        args, kwargs = post.call_args
        self.assertEqual(args, (ENDPOINT,))
        self.assertEqual(kwargs["json"], payload)
        self.assertEqual(payload["date"], "2024-02-05")
        self.assertTrue(payload["timestamp"].endswith("Z"))

    @patch("ordercal.services.order_client.requests.post")
    def test_any_2xx_is_success(self, post):
        for status in (200, 201, 204):
            post.return_value = _response(status)
            OrderClient(ENDPOINT).place_order("2024-02-05")

    @patch("ordercal.services.order_client.requests.post")
    def test_non_2xx_raises_rejected(self, post):
        for status in (301, 400, 404, 500, 503):
            post.return_value = _response(status)
            with self.assertRaises(OrderRejected) as cm:
                OrderClient(ENDPOINT).place_order("2024-02-05")
            self.assertEqual(cm.exception.status_code, status)
            self.assertIsInstance(cm.exception, OrderError)

    @patch("ordercal.services.order_client.requests.post")
    def test_transport_failure(self, post):
        post.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(OrderTransportError):
            OrderClient(ENDPOINT).place_order("2024-02-05")
        self.assertEqual(post.call_count, 1)


if __name__ == "__main__":
    unittest.main()
