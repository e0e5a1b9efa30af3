from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

from app_customer_interface.models import Order
from app_owner_admin_panel.models import Dish, Restaurant

pytestmark = pytest.mark.django_db


@pytest.fixture
def owner_client(client, owner):
    client.force_login(owner)
    return client


def dish_data(**overrides):
    data = {
        'name': 'Tacos',
        'description': 'Three soft tacos',
        'price': '9.75',
        'preparation_time_minutes': '10',
        'availability': 'on',
    }
    data.update(overrides)
    return data


def test_dashboard_needs_login(client):
    response = client.get(reverse('dashboard'))

    assert response.status_code == 302
    assert response.url.startswith(reverse('login'))


def test_login(client, owner):
    response = client.post(reverse('login'), {'username': 'owner', 'password': 's3cret-Passw0rd'})

    assert response.status_code == 302
    assert response.url == reverse('dashboard')


def test_login_failure(client, owner):
    response = client.post(reverse('login'), {'username': 'owner', 'password': 'wrong'})

    assert response.status_code == 200
    assert b'Login attempt failed' in response.content


def test_signup_creates_profile(client):
    response = client.post(reverse('signup'), {
        'username': 'newowner',
        'email': 'new@example.com',
        'full_name': 'Nina New',
        'password1': 'Str0ng-passphrase!',
        'password2': 'Str0ng-passphrase!',
    })

    assert response.status_code == 302
    assert response.url == reverse('restaurant_setup')
    user = User.objects.get(username='newowner')
    assert user.profile.full_name == 'Nina New'


def test_restaurant_setup(client, owner):
    client.force_login(owner)

    response = client.post(reverse('restaurant_setup'), {'name': 'Noodle Bar', 'location': 'Main St'})

    assert response.status_code == 302
    assert Restaurant.objects.get(owner=owner).name == 'Noodle Bar'


def test_menu_pages_need_a_restaurant(owner_client):
    response = owner_client.get(reverse('menu_manage'))

    assert response.status_code == 302
    assert response.url == reverse('restaurant_setup')


def test_setup_redirects_when_restaurant_exists(owner_client, restaurant):
    response = owner_client.get(reverse('restaurant_setup'))

    assert response.url == reverse('restaurant_edit')


def test_restaurant_edit(owner_client, restaurant):
    owner_client.post(reverse('restaurant_edit'), {'name': 'Harbor Grill & Bar', 'location': 'Pier 5'})

    restaurant.refresh_from_db()
    assert restaurant.name == 'Harbor Grill & Bar'
    assert restaurant.location == 'Pier 5'


def test_dashboard_lists_own_orders(owner_client, restaurant, burger, owner):
    Order.objects.create(restaurant=restaurant, dish=burger, quantity=2, table_number=4)
    stranger = User.objects.create_user(username='stranger', password='x')
    elsewhere = Restaurant.objects.create(name='Elsewhere', owner=stranger)
    Order.objects.create(restaurant=elsewhere, quantity=1, table_number=1)

    response = owner_client.get(reverse('dashboard'))

    assert response.status_code == 200
    assert [o.table_number for o in response.context['orders']] == [4]
    assert response.context['menu_url'].endswith(reverse('customer_menu', args=[restaurant.id]))


def test_update_order_status(owner_client, restaurant, burger):
    order = Order.objects.create(restaurant=restaurant, dish=burger, quantity=1, table_number=4)

    response = owner_client.post(
        reverse('update_order_status', args=[order.id]), {'status': 'ready'},
        HTTP_X_REQUESTED_WITH='XMLHttpRequest',
    )

    assert response.json()['order_status'] == 'ready'
    order.refresh_from_db()
    assert order.status == Order.STATUS_READY


def test_cannot_update_someone_elses_order(owner_client, restaurant):
    stranger = User.objects.create_user(username='stranger', password='x')
    elsewhere = Restaurant.objects.create(name='Elsewhere', owner=stranger)
    order = Order.objects.create(restaurant=elsewhere, quantity=1, table_number=1)

    owner_client.post(reverse('update_order_status', args=[order.id]), {'status': 'completed'})

    order.refresh_from_db()
    assert order.status == Order.STATUS_PENDING


def test_invalid_status(owner_client, restaurant, burger):
    order = Order.objects.create(restaurant=restaurant, dish=burger, quantity=1, table_number=4)

    response = owner_client.post(
        reverse('update_order_status', args=[order.id]), {'status': 'eaten'},
        HTTP_X_REQUESTED_WITH='XMLHttpRequest',
    )

    assert response.status_code == 400


def test_qr_code_png(owner_client, restaurant):
    response = owner_client.get(reverse('qr_code'))

    assert response['Content-Type'] == 'image/png'
    assert response.content.startswith(b'\x89PNG')

    download = owner_client.get(reverse('qr_code'), {'download': '1'})
    assert 'harbor-grill-menu-qr.png' in download['Content-Disposition']


def test_add_dish(owner_client, restaurant):
    response = owner_client.post(reverse('add_dish'), dish_data())

    assert response.url == reverse('menu_manage')
    dish = Dish.objects.get(restaurant=restaurant)
    assert dish.price == Decimal('9.75')
    assert dish.availability is True


def test_add_dish_rejects_free_dish(owner_client, restaurant):
    response = owner_client.post(reverse('add_dish'), dish_data(price='0'))

    assert response.status_code == 200
    assert 'price' in response.context['form'].errors
    assert not Dish.objects.exists()


def test_add_dish_with_model_upload(owner_client, restaurant):
    upload = SimpleUploadedFile('tacos.glb', b'glTF\x02\x00\x00\x00', content_type='model/gltf-binary')

    owner_client.post(reverse('add_dish'), dish_data(model_file=upload))

    dish = Dish.objects.get()
    assert dish.has_3d_model
    assert dish.model_file.name == f'dish-assets/{restaurant.id}/{dish.id}.glb'
    assert dish.preview_model_url.endswith('.glb')


def test_add_dish_rejects_other_model_formats(owner_client, restaurant):
    upload = SimpleUploadedFile('tacos.obj', b'v 0 0 0', content_type='text/plain')

    response = owner_client.post(reverse('add_dish'), dish_data(model_file=upload))

    assert 'model_file' in response.context['form'].errors
    assert not Dish.objects.exists()


def test_add_dish_rejects_oversized_model(owner_client, restaurant, settings):
    settings.MODEL_UPLOAD_MAX_BYTES = 4
    upload = SimpleUploadedFile('tacos.glb', b'glTF-too-big', content_type='model/gltf-binary')

    response = owner_client.post(reverse('add_dish'), dish_data(model_file=upload))

    assert 'model_file' in response.context['form'].errors


def test_edit_dish(owner_client, burger):
    owner_client.post(reverse('edit_dish', args=[burger.id]), dish_data(name='Cheeseburger', price='16.49'))

    burger.refresh_from_db()
    assert burger.name == 'Cheeseburger'
    assert burger.price == Decimal('16.49')


def test_toggle_and_delete_dish(owner_client, burger):
    owner_client.post(reverse('toggle_dish_availability', args=[burger.id]))
    burger.refresh_from_db()
    assert burger.availability is False

    owner_client.post(reverse('delete_dish', args=[burger.id]))
    assert not Dish.objects.filter(pk=burger.id).exists()


def test_orders_survive_dish_deletion(owner_client, restaurant, burger):
    order = Order.objects.create(restaurant=restaurant, dish=burger, quantity=1, table_number=2)

    owner_client.post(reverse('delete_dish', args=[burger.id]))

    order.refresh_from_db()
    assert order.dish is None
    assert owner_client.get(reverse('dashboard')).status_code == 200


def test_cannot_edit_someone_elses_dish(owner_client, restaurant):
    stranger = User.objects.create_user(username='stranger', password='x')
    elsewhere = Restaurant.objects.create(name='Elsewhere', owner=stranger)
    dish = Dish.objects.create(restaurant=elsewhere, name='Secret', price='1.00')

    assert owner_client.get(reverse('edit_dish', args=[dish.id])).status_code == 404


def test_idle_owner_is_signed_out(owner_client, restaurant, settings):
    session = owner_client.session
    session['last_activity'] = '2000-01-01T00:00:00+00:00'
    session.save()

    response = owner_client.get(reverse('dashboard'))

    assert response.status_code == 302
    assert response.url.startswith(reverse('login'))
