from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Initialize the application'

    def add_arguments(self, parser):
        parser.add_argument(
            '--with-sample-data',
            action='store_true',
            help='Load demo vehicles and customers after migrating',
        )

    def handle(self, *args, **options):
        # Run migrations
        call_command('migrate', interactive=False, verbosity=options['verbosity'])

        # Create superuser if not exists
        User = get_user_model()
        if not User.objects.filter(is_superuser=True).exists():
            User.objects.create_superuser(
                username=settings.ADMIN_USERNAME,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
            )
            self.stdout.write(self.style.SUCCESS(f'Superuser {settings.ADMIN_USERNAME} created'))

        if options['with_sample_data']:
            call_command('create_sample_data', stdout=self.stdout)

        self.stdout.write(self.style.SUCCESS('Application initialized successfully'))
