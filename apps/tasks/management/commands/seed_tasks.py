from django.core.management.base import BaseCommand
from django.db import transaction

from apps.tasks.dtos import TaskIn
from apps.tasks.models import Task
from apps.tasks.services import create_task

SAMPLE_TASKS = [
    ("Buy milk", None, "open"),
    ("Write quarterly report", "Numbers are in the shared drive", "in_progress"),
    ("Renew passport", "Appointment at 10:00", "open"),
    ("Fix leaking tap", None, "done"),
    ("Book dentist", None, "open"),
]


class Command(BaseCommand):
    help = 'Seeds the database with sample tasks.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--count',
            type=int,
            default=10,
            help='Number of tasks to create (default 10)',
        )
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing tasks before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clean']:
            self.stdout.write(self.style.WARNING('Deleting existing tasks...'))
            deleted, _ = Task.objects.all().delete()
            self.stdout.write(f' - Removed {deleted} tasks')

        count = max(0, options['count'])
        for i in range(count):
            title, description, status = SAMPLE_TASKS[i % len(SAMPLE_TASKS)]
            if i >= len(SAMPLE_TASKS):
                title = f"{title} ({i // len(SAMPLE_TASKS) + 1})"
            create_task(TaskIn(title=title, description=description, status=status))

        self.stdout.write(self.style.SUCCESS(f'Seeded {count} tasks.'))
