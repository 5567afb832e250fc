"""
Static product catalog. The storefront sells a single item.
"""

PRODUCT = {
    "id": "cmf-watch-pro-2",
    "name": "CMF By Nothing WATCH PRO 2, AMOLED, GPS, BLUETOOTH CALLS - Dark Grey",
    "description": (
        "A sleek and stylish smartwatch with health tracking features, GPS navigation, "
        "and Bluetooth calling capabilities. The AMOLED display provides vibrant colors "
        "and excellent visibility even in bright sunlight."
    ),
    "title": "CMF By Nothing WATCH PRO 2",
    "subtitle": "AMOLED, GPS, Bluetooth Calls - Dark Grey",
    "price": "₹16,499",
    "amount": 16499,
    "original_price": "₹19,999",
    "discount": "18% off",
    "image": "https://images.unsplash.com/photo-1579586337278-3befd40fd17a?ixlib=rb-1.2.1&auto=format&fit=crop&w=1000&q=80",
    "features": [
        "1.96\" AMOLED Display",
        "Bluetooth Calling",
        "GPS Navigation",
        "Heart Rate & SpO2 Monitoring",
        "IP68 Water Resistant",
        "7-Day Battery Life",
    ],
}


def get_product() -> dict:
    return PRODUCT
