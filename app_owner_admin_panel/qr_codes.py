# app_owner_admin_panel/qr_codes.py
import io
import logging
import os

import qrcode
from django.conf import settings
from django.urls import reverse
from django.utils.text import slugify

logger = logging.getLogger(__name__)


def menu_path(restaurant_id):
    return reverse('customer_menu', kwargs={'restaurant_id': restaurant_id})


def menu_url(restaurant_id, request=None, base_url=None):
    """
    Absolute ordering URL printed into a restaurant's QR code.

    An explicit ``base_url`` wins, then ``PUBLIC_BASE_URL``, then the host
    of the current request.
    """
    path = menu_path(restaurant_id)
    base_url = (base_url or settings.PUBLIC_BASE_URL or '').rstrip('/')
    if base_url:
        return f"{base_url}{path}"
    if request is not None:
        return request.build_absolute_uri(path)
    raise ValueError("A base URL is required to build a menu URL outside of a request")


def make_qr_image(data):
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)
    return qr.make_image(fill_color="black", back_color="white")


def qr_png_bytes(data):
    buffer = io.BytesIO()
    make_qr_image(data).save(buffer)
    return buffer.getvalue()


def qr_filename(restaurant_name):
    return f"{slugify(restaurant_name) or 'restaurant'}-menu-qr.png"


def save_qr_png(data, dir_path, filename):
    if not os.path.exists(dir_path):
        os.makedirs(dir_path)

    file_path = os.path.join(dir_path, filename)
    make_qr_image(data).save(file_path)
    logger.info("Generated QR code %s for %s", file_path, data)
    return file_path
