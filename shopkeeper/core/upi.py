"""
UPI payment-link helpers.

Only the ``upi://pay`` deep-link string is built here. Turning it into a
scannable image is delegated to an external QR service; when that service
is unreachable the caller gets ``None`` and the client renders its own.
"""

import logging
import random
import re
import string
import time
from decimal import Decimal
from urllib.parse import quote, urlencode

import requests

from shopkeeper.core.config import settings

logger = logging.getLogger("shopkeeper")

UPI_ID_PATTERN = re.compile(r"^[a-zA-Z0-9.\-_]{2,256}@[a-zA-Z]{2,64}$")

# Handle suffix -> app name, checked in order
UPI_APP_HANDLES = (
    ("paytm", "Paytm"),
    ("phonepe", "PhonePe"),
    ("googlepay", "Google Pay"),
    ("gpay", "Google Pay"),
    ("bhim", "BHIM"),
    ("ybl", "PhonePe"),
    ("ibl", "PhonePe"),
    ("axl", "PhonePe"),
    ("okaxis", "Google Pay"),
    ("okicici", "Google Pay"),
    ("oksbi", "Google Pay"),
    ("okhdfcbank", "Google Pay"),
)

APP_SCHEMES = {
    "phonepe": "phonepe://pay",
    "googlepay": "tez://upi/pay",
    "gpay": "tez://upi/pay",
    "paytm": "paytmmp://pay",
    "bhim": "bhim://pay",
}


def build_upi_url(
    payee_address: str,
    payee_name: str,
    amount: Decimal | None = None,
    note: str | None = None,
    transaction_ref: str | None = None,
    merchant_code: str | None = None,
) -> str:
    params = {
        "pa": payee_address,
        "pn": payee_name,
        "cu": settings.UPI_CURRENCY,
    }

    if amount is not None:
        params["am"] = f"{Decimal(amount):.2f}"

    if note:
        params["tn"] = note

    if transaction_ref:
        params["tr"] = transaction_ref

    if merchant_code:
        params["mc"] = merchant_code

    return "upi://pay?" + urlencode(params, quote_via=quote, safe="@")


def validate_upi_id(upi_id: str) -> bool:
    return bool(UPI_ID_PATTERN.match(upi_id or ""))


def upi_app_name(upi_id: str) -> str:
    _, _, handle = (upi_id or "").partition("@")
    handle = handle.lower()

    for key, name in UPI_APP_HANDLES:
        if handle and key in handle:
            return name

    return "UPI"


def generate_transaction_reference() -> str:
    timestamp = str(int(time.time() * 1000))
    suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=6))
    return f"TXN{timestamp[-6:]}{suffix}"


def app_deep_link(upi_url: str, app: str | None = None) -> str:
    scheme = APP_SCHEMES.get((app or "").lower())

    if scheme is None:
        return upi_url

    _, _, query = upi_url.partition("?")
    return f"{scheme}?{query}"


def qr_image_url(upi_url: str) -> str | None:
    url = settings.QR_SERVICE_URL.format(data=quote(upi_url, safe=""))

    if not settings.QR_SERVICE_CHECK:
        return url

    try:
        response = requests.head(url, timeout=settings.QR_SERVICE_TIMEOUT)
    except requests.RequestException as e:
        logger.warning(f"QR service not reachable: {str(e)}")
        return None

    if not response.ok:
        logger.warning(f"QR service check failed. Status: {response.status_code}")
        return None

    return url
