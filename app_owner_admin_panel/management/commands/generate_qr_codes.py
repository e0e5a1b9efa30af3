from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from app_owner_admin_panel.models import Restaurant
from app_owner_admin_panel.qr_codes import menu_url, qr_filename, save_qr_png


class Command(BaseCommand):
    help = 'Writes one ordering QR code PNG per restaurant'

    def add_arguments(self, parser):
        parser.add_argument('--base-url', default='', help='Public site URL, e.g. https://menu.example.com')
        parser.add_argument('--output-dir', default=str(settings.QR_CODE_DIR))

    def handle(self, *args, **options):
        base_url = options['base_url'] or settings.PUBLIC_BASE_URL
        if not base_url:
            raise CommandError('Pass --base-url or set PUBLIC_BASE_URL')

        made = 0
        for restaurant in Restaurant.objects.order_by('name'):
            url = menu_url(restaurant.id, base_url=base_url)
            filename = f"{restaurant.id.hex[:8]}__{qr_filename(restaurant.name)}"
            file_path = save_qr_png(url, options['output_dir'], filename)
            self.stdout.write(f"OK  {restaurant.name}  ->  {file_path}  ({url})")
            made += 1

        self.stdout.write(self.style.SUCCESS(f'Generated {made} QR codes in {options["output_dir"]}'))
