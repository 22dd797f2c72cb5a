# ordercal/services/config.py
import os

# Order endpoint the Order button posts to
ORDER_ENDPOINT = os.getenv("ORDERCAL_ORDER_ENDPOINT", "https://example.com/order")

# JSON file with {"offerDays": [...], "orderDays": [...]}; empty -> demo data
MARKERS_PATH = os.getenv("ORDERCAL_MARKERS", "")

APPEARANCE_MODE = os.getenv("ORDERCAL_APPEARANCE", "dark")
LOG_LEVEL = os.getenv("ORDERCAL_LOG_LEVEL", "INFO")
