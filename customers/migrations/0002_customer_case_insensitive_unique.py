import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('customers', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(
            model_name='customer',
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower('email'),
                name='customer_email_ci_unique',
                violation_error_message='A customer with this email already exists.',
            ),
        ),
        migrations.AddConstraint(
            model_name='customer',
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower('driver_license_number'),
                name='customer_license_ci_unique',
                violation_error_message='A customer with this driver license number already exists.',
            ),
        ),
    ]
