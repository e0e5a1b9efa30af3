import os

import pytest
from django.core.management import CommandError, call_command
from django.test import RequestFactory

from app_owner_admin_panel.qr_codes import menu_url, qr_filename, qr_png_bytes


def test_menu_url_prefers_explicit_base(restaurant):
    url = menu_url(restaurant.id, base_url='https://menu.example.com/')

    assert url == f'https://menu.example.com/order/{restaurant.id}/'


def test_menu_url_uses_configured_base(restaurant, settings):
    settings.PUBLIC_BASE_URL = 'https://qr.example.com'

    assert menu_url(restaurant.id).startswith('https://qr.example.com/order/')


def test_menu_url_from_request(restaurant):
    request = RequestFactory().get('/dashboard/')

    assert menu_url(restaurant.id, request=request) == f'http://testserver/order/{restaurant.id}/'


def test_menu_url_needs_a_base(restaurant):
    with pytest.raises(ValueError):
        menu_url(restaurant.id)


def test_qr_png_bytes():
    assert qr_png_bytes('https://menu.example.com/order/x/').startswith(b'\x89PNG')


@pytest.mark.parametrize('name, expected', [
    ('Harbor Grill', 'harbor-grill-menu-qr.png'),
    ('!!!', 'restaurant-menu-qr.png'),
])
def test_qr_filename(name, expected):
    assert qr_filename(name) == expected


def test_generate_qr_codes_command(restaurant, tmp_path):
    call_command('generate_qr_codes', base_url='https://menu.example.com', output_dir=str(tmp_path))

    [filename] = os.listdir(tmp_path)
    assert filename.endswith('harbor-grill-menu-qr.png')
    with open(tmp_path / filename, 'rb') as png:
        assert png.read(4) == b'\x89PNG'


def test_generate_qr_codes_needs_base_url(db):
    with pytest.raises(CommandError):
        call_command('generate_qr_codes')
