import json
import os
import tempfile
import unittest
from datetime import date

from ordercal.month_grid import parse_iso_day
from ordercal.services.markers import MarkerStore, demo_store, load_markers


class LoadMarkersTests(unittest.TestCase):

    def _write(self, tmp, content):
        path = os.path.join(tmp, "markers.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_reads_both_lists(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, json.dumps({
                "offerDays": ["2024-02-05", "2024-02-06"],
                "orderDays": ["2024-02-06"],
            }))
            store = load_markers(path)
        self.assertEqual(store.offer_days, ["2024-02-05", "2024-02-06"])
        self.assertEqual(store.order_days, ["2024-02-06"])

    def test_drops_bad_entries(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, json.dumps({
                "offerDays": ["2024-02-05", "2024-2-6", 20240207, None, "2024-02-30"],
                "orderDays": "2024-02-05",
            }))
            with self.assertLogs("ordercal.services.markers", level="WARNING"):
                store = load_markers(path)
        self.assertEqual(store.offer_days, ["2024-02-05"])
        self.assertEqual(store.order_days, [])

    def test_missing_file_is_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("ordercal.services.markers", level="WARNING"):
                store = load_markers(os.path.join(tmp, "nope.json"))
        self.assertEqual(store.snapshot(), (frozenset(), frozenset()))

    def test_broken_json_is_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "{not json")
            with self.assertLogs("ordercal.services.markers", level="WARNING"):
                store = load_markers(path)
        self.assertEqual(store.offer_days, [])

    def test_non_object_is_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "[1, 2]")
            with self.assertLogs("ordercal.services.markers", level="WARNING"):
                store = load_markers(path)
        self.assertEqual(store.order_days, [])


class StoreTests(unittest.TestCase):

    def test_snapshot_is_frozen_copy(self):
        store = MarkerStore(["2024-02-05"], ["2024-02-05"])
        offers, orders = store.snapshot()
        store.offer_days.append("2024-02-06")
        self.assertEqual(offers, frozenset({"2024-02-05"}))
        self.assertEqual(orders, frozenset({"2024-02-05"}))

    def test_demo_store(self):
        today = date(2024, 2, 14)  # Wednesday
        store = demo_store(today, weeks=2)
        days = [parse_iso_day(d) for d in store.offer_days]
        self.assertEqual(len(days), 10)
        self.assertTrue(all(d.weekday() < 5 for d in days))
        self.assertEqual(days[0], today)
        self.assertTrue(store.order_days)
        self.assertTrue(set(store.order_days) <= set(store.offer_days))


if __name__ == "__main__":
    unittest.main()
